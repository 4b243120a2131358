"""Message classification and render-configuration resolution.

Given one :class:`~chat_transcript.models.transcript.TranscriptItem`, the
resolver decides which view renders it, merges the built-in configuration
for that view with caller overrides, and attaches the capability hooks the
view is allowed to see.

Classification is an ordered predicate chain; the first match wins:

1. ``content.data`` looks like an image URL  -> image attachment view
2. participant message                       -> participant message view
3. attachment message                        -> participant message view
4. recognised event content type             -> centered system message
5. anything else                             -> suppressed

The module is pure: no logging, no I/O, no exceptions for any valid item.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable, Mapping
from typing import Any

from chat_transcript.events import is_recognized_event as default_event_predicate
from chat_transcript.models.render import (
    CapabilityHooks,
    ComponentKind,
    ConfigOverrides,
    ConfigSlot,
    MessageConfig,
    RenderConfiguration,
    TextAlign,
)
from chat_transcript.models.transcript import ItemType, TranscriptItem

# Anchored at the end so "photo.png?x=1" or "file.png.txt" do not match.
_IMAGE_URL_RE = re.compile(r"\.(jpg|jpeg|png|gif|bmp|webp|svg)$", re.IGNORECASE)

DEFAULT_CONFIG: Mapping[ConfigSlot, MessageConfig] = {
    ConfigSlot.PARTICIPANT_MESSAGE: MessageConfig(renderer="ParticipantMessage"),
    ConfigSlot.ATTACHMENT_MESSAGE: MessageConfig(renderer="ParticipantMessage"),
    ConfigSlot.SYSTEM_MESSAGE: MessageConfig(renderer="SystemMessage"),
    ConfigSlot.IMAGE_MESSAGE: MessageConfig(renderer="ImageAttachment"),
}

# camelCase names used by transcript-config tables on the web side.
_OVERRIDE_ALIASES = {"render": "renderer", "isHTML": "is_html"}
_CONFIG_FIELDS = frozenset(f.name for f in dataclasses.fields(MessageConfig))

_NO_HOOKS = CapabilityHooks()


def build_key(item: TranscriptItem) -> str:
    """Return the stable rendering key ``id.version.receiptType``."""
    receipt_type = item.transport_details.message_receipt_type or ""
    return f"{item.id}.{item.version}.{receipt_type}"


def image_url_of(item: TranscriptItem) -> str | None:
    """Return the trimmed image URL carried by *item*, if it is one."""
    data = item.content.data
    if not data:
        return None
    text = data.strip()
    if _IMAGE_URL_RE.search(text):
        return text
    return None


def merge_config(slot: ConfigSlot, overrides: ConfigOverrides | None = None) -> MessageConfig:
    """Apply the override entry for *slot* field-by-field over its default.

    Override tables may be keyed by :class:`ConfigSlot` members or their
    string values.  Keys inside an entry may use either the snake_case field
    names or the ``render``/``isHTML`` aliases; anything else is ignored.
    """
    base = DEFAULT_CONFIG[slot]
    if not overrides:
        return base

    entry = overrides.get(slot)
    if entry is None:
        entry = overrides.get(slot.value)
    if not entry:
        return base

    changes: dict[str, Any] = {}
    for name, value in entry.items():
        field_name = _OVERRIDE_ALIASES.get(name, name)
        if field_name in _CONFIG_FIELDS:
            changes[field_name] = value
    return dataclasses.replace(base, **changes)


def resolve(
    item: TranscriptItem,
    overrides: ConfigOverrides | None = None,
    is_latest: bool = False,
    hooks: CapabilityHooks | None = None,
    is_recognized_event: Callable[[str], bool] = default_event_predicate,
) -> RenderConfiguration:
    """Resolve how a transcript item should be rendered.

    Args:
        item: The transcript item to classify.
        overrides: Caller override table, merged over the defaults on
            every call.
        is_latest: Whether *item* is the last element of the transcript.
            Forwarded to message views, where it gates read receipts.
        hooks: Capability hooks to forward to message views.
        is_recognized_event: Predicate deciding whether a content type is a
            system event worth showing.

    Returns:
        A :class:`RenderConfiguration`.  Items that match no rule come back
        with ``component_kind == ComponentKind.SUPPRESSED``.
    """
    hooks = hooks or _NO_HOOKS
    key = build_key(item)

    image_url = image_url_of(item)
    if image_url is not None:
        config = merge_config(ConfigSlot.IMAGE_MESSAGE, overrides)
        return RenderConfiguration(
            component_kind=ComponentKind.IMAGE_ATTACHMENT,
            key=key,
            item=item,
            renderer=config.renderer,
            is_raw_html=config.is_html,
            image_url=image_url,
            display_name=image_url.split("/")[-1],
        )

    if item.type is ItemType.PARTICIPANT_MESSAGE:
        config = merge_config(ConfigSlot.PARTICIPANT_MESSAGE, overrides)
        extra_props: dict[str, Any] = {
            "media_operations": {
                "add_message": hooks.add_message,
                "download_attachment": hooks.download_attachment,
            },
            "text_input_ref": hooks.text_input_ref,
            "is_latest_message": is_latest,
            "send_read_receipt": hooks.send_read_receipt,
        }
        return _message_view(item, key, config, extra_props)

    if item.type is ItemType.ATTACHMENT_MESSAGE:
        config = merge_config(ConfigSlot.ATTACHMENT_MESSAGE, overrides)
        extra_props = {
            "media_operations": {
                "download_attachment": hooks.download_attachment,
            },
            "is_latest_message": is_latest,
            "send_read_receipt": hooks.send_read_receipt,
        }
        return _message_view(item, key, config, extra_props)

    if is_recognized_event(item.content.type):
        config = merge_config(ConfigSlot.SYSTEM_MESSAGE, overrides)
        return RenderConfiguration(
            component_kind=ComponentKind.SYSTEM_MESSAGE,
            key=key,
            item=item,
            renderer=config.renderer,
            is_raw_html=config.is_html,
            text_align=TextAlign.CENTER,
        )

    return RenderConfiguration(component_kind=ComponentKind.SUPPRESSED, key=key, item=item)


def _message_view(
    item: TranscriptItem,
    key: str,
    config: MessageConfig,
    extra_props: dict[str, Any],
) -> RenderConfiguration:
    return RenderConfiguration(
        component_kind=ComponentKind.PARTICIPANT_MESSAGE,
        key=key,
        item=item,
        renderer=config.renderer,
        is_raw_html=config.is_html,
        extra_props=extra_props,
    )
