"""Render targets for the cascade renderer."""

from bbview.sinks.base import UISink
from bbview.sinks.recording import DrawOp, OpKind, RecordingSink

__all__ = ["DrawOp", "OpKind", "RecordingSink", "UISink"]
