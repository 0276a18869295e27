"""
foodpark: post the foodPark vendor list for a trading day to Slack.

Packages:
  - foodpark.extract: pure HTML -> vendor list
  - foodpark.fetch: page download (httpx)
  - foodpark.notify: Slack message composition and delivery
"""

__version__ = "0.1.0"
