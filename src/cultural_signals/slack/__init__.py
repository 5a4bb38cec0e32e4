"""Slack ingress: socket-mode listener, message filtering, replies and reactions."""

from cultural_signals.slack.blocks import format_analysis_blocks
from cultural_signals.slack.handlers import build_permalink, process_signal, should_process
from cultural_signals.slack.listener import SignalListener
from cultural_signals.slack.notifier import (
    add_reaction,
    notify_error,
    post_signal_reply,
    remove_reaction,
)

__all__ = [
    "add_reaction",
    "build_permalink",
    "format_analysis_blocks",
    "notify_error",
    "post_signal_reply",
    "process_signal",
    "remove_reaction",
    "should_process",
    "SignalListener",
]
