from .slack import WALK_UP_FOOTNOTE, build_message, post_webhook

__all__ = ["WALK_UP_FOOTNOTE", "build_message", "post_webhook"]
