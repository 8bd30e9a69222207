"""Tree-to-message parsing.

Converts generic document trees, as produced by ``json.load`` or
``yaml.safe_load``, into Message values. A tree node is one of:

- None (null)
- a scalar: str, int, float or bool
- a sequence: list or tuple
- a mapping with string-like keys

Object nodes are classified by their reserved fields, checked in order:
text, actionbar, sound, then any title field. Strict parsing raises
MessageParseError for anything else; lenient parsing returns None so the
caller can descend into the object instead.

Known limitation: a nested object whose field name is a reserved message
field (e.g. a group called "title") is taken as a message, not descended
into. Since such a field must then hold a scalar, parsing that group fails
with MessageParseError rather than producing a message.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Optional, cast

from parley.core.logging import get_module_logger
from parley.exceptions import MessageParseError
from parley.messages.durations import parse_duration
from parley.messages.models import (
    EMPTY,
    ActionbarMessage,
    CompositeMessage,
    Message,
    SoundMessage,
    TextMessage,
    TitleMessage,
)

logger = get_module_logger()


class Fields:
    """Reserved field names of message objects."""

    TEXT = "text"

    ACTIONBAR = "actionbar"

    TITLE = "title"
    SUBTITLE = "subtitle"
    FADEIN = "fadein"
    FADE_IN = "fade-in"
    STAY = "stay"
    FADEOUT = "fadeout"
    FADE_OUT = "fade-out"

    SOUND = "sound"
    SOURCE = "source"
    VOLUME = "volume"
    PITCH = "pitch"
    SEED = "seed"

    TITLE_FIELDS = (TITLE, SUBTITLE, FADE_IN, FADEIN, STAY, FADE_OUT, FADEOUT)


class NodeKind(str, Enum):
    """Shape of a tree node."""

    NULL = "null"
    SCALAR = "scalar"
    ARRAY = "array"
    OBJECT = "object"
    UNSUPPORTED = "unsupported"


def node_kind(node: Any) -> NodeKind:
    """Classify a tree node by shape."""
    if node is None:
        return NodeKind.NULL
    if isinstance(node, (str, bool, int, float)):
        return NodeKind.SCALAR
    if isinstance(node, (list, tuple)):
        return NodeKind.ARRAY
    if isinstance(node, Mapping):
        return NodeKind.OBJECT
    return NodeKind.UNSUPPORTED


def is_message_object(node: Mapping) -> bool:
    """Check whether an object node carries any reserved message field."""
    return (
        Fields.TEXT in node
        or Fields.ACTIONBAR in node
        or Fields.SOUND in node
        or any(name in node for name in Fields.TITLE_FIELDS)
    )


def is_message_node(node: Any) -> bool:
    """Check whether a node parses as a single message.

    Null, scalar and array nodes always do; object nodes only when they
    carry a reserved message field.
    """
    kind = node_kind(node)
    if kind is NodeKind.OBJECT:
        return is_message_object(node)
    return kind is not NodeKind.UNSUPPORTED


def as_text(node: Any) -> str:
    """Coerce a scalar node to its textual form."""
    if isinstance(node, bool):
        return "true" if node else "false"
    return str(node)


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _scalar_text(node: Any, field: str) -> str:
    if node_kind(node) is not NodeKind.SCALAR:
        raise MessageParseError(
            f"Field '{field}' must be a scalar, got {type(node).__name__}"
        )
    return as_text(node)


def _text_or_none(node: Any, field: str) -> Optional[str]:
    return None if node is None else _scalar_text(node, field)


def _float_or_none(node: Any, field: str) -> Optional[float]:
    if node is None:
        return None
    text = _scalar_text(node, field)
    try:
        return float(text)
    except ValueError as e:
        raise MessageParseError(f"Invalid number for '{field}': {node!r}") from e


def _int_or_none(node: Any, field: str) -> Optional[int]:
    if node is None:
        return None
    if isinstance(node, float) and not node.is_integer():
        raise MessageParseError(f"Invalid integer for '{field}': {node!r}")
    if isinstance(node, float):
        value = int(node)
    else:
        text = _scalar_text(node, field)
        try:
            value = int(text)
        except ValueError as e:
            raise MessageParseError(
                f"Invalid integer for '{field}': {node!r}"
            ) from e
    if not INT64_MIN <= value <= INT64_MAX:
        raise MessageParseError(f"Integer out of range for '{field}': {node!r}")
    return value


def _required_text(node: Mapping, field: str) -> str:
    value = node[field]
    if value is None:
        raise MessageParseError(f"Field '{field}' must not be null")
    return _scalar_text(value, field)


def _duration_or_none(node: Any, field: str):
    text = _text_or_none(node, field)
    return None if text is None else parse_duration(text)


def _first_present(node: Mapping, *names: str) -> Any:
    for name in names:
        if name in node:
            return node[name]
    return None


class MessageNodeParser:
    """Parses tree nodes into Message values."""

    def parse(self, node: Any) -> Message:
        """Parse a node into exactly one Message.

        Args:
            node: Tree node.

        Returns:
            The parsed Message.

        Raises:
            MessageParseError: If the node, or a nested node, is not a message.
        """
        return cast(Message, self._parse(node, strict=True))

    def parse_lenient(self, node: Any) -> Optional[Message]:
        """Parse a node, returning None instead of raising on unknown objects.

        Malformed fields inside a recognised message (bad durations, bad
        numbers) still raise MessageParseError.
        """
        return self._parse(node, strict=False)

    def is_message_node(self, node: Any) -> bool:
        """Check whether a node parses as a single message."""
        return is_message_node(node)

    def _parse(self, node: Any, strict: bool) -> Optional[Message]:
        kind = node_kind(node)
        if kind is NodeKind.NULL:
            return EMPTY
        if kind is NodeKind.SCALAR:
            return TextMessage(as_text(node))
        if kind is NodeKind.ARRAY:
            return CompositeMessage(tuple(self.parse(element) for element in node))
        if kind is NodeKind.OBJECT:
            message = self._parse_object(node)
            if message is None and strict:
                raise MessageParseError(f"Cannot parse node: {node!r}")
            return message
        if strict:
            raise MessageParseError(f"Unsupported node type: {type(node).__name__}")
        return None

    def _parse_object(self, node: Mapping) -> Optional[Message]:
        if Fields.TEXT in node:
            content = node[Fields.TEXT]
            if content is None:
                return EMPTY
            return TextMessage(_scalar_text(content, Fields.TEXT))

        if Fields.ACTIONBAR in node:
            return ActionbarMessage(_required_text(node, Fields.ACTIONBAR))

        if Fields.SOUND in node:
            return self._parse_sound(node)

        return self._parse_title(node)

    def _parse_sound(self, node: Mapping) -> SoundMessage:
        volume = _float_or_none(node.get(Fields.VOLUME), Fields.VOLUME)
        pitch = _float_or_none(node.get(Fields.PITCH), Fields.PITCH)
        return SoundMessage(
            sound=_required_text(node, Fields.SOUND),
            source=_text_or_none(node.get(Fields.SOURCE), Fields.SOURCE),
            volume=1.0 if volume is None else volume,
            pitch=1.0 if pitch is None else pitch,
            seed=_int_or_none(node.get(Fields.SEED), Fields.SEED),
        )

    def _parse_title(self, node: Mapping) -> Optional[TitleMessage]:
        if not any(name in node for name in Fields.TITLE_FIELDS):
            return None
        return TitleMessage(
            title=_text_or_none(node.get(Fields.TITLE), Fields.TITLE),
            subtitle=_text_or_none(node.get(Fields.SUBTITLE), Fields.SUBTITLE),
            fade_in=_duration_or_none(
                _first_present(node, Fields.FADE_IN, Fields.FADEIN), Fields.FADE_IN
            ),
            stay=_duration_or_none(node.get(Fields.STAY), Fields.STAY),
            fade_out=_duration_or_none(
                _first_present(node, Fields.FADE_OUT, Fields.FADEOUT), Fields.FADE_OUT
            ),
        )


class MessageMapParser:
    """Flattens a tree into a mapping of path keys to messages.

    Message nodes are recorded at their path; other objects are descended
    into, joining field names with path_separator. Null nodes produce no
    entry, and neither do objects without any fields.

    Attributes:
        parser: Node parser used for message nodes.
        path_separator: Single character joining path segments.
    """

    def __init__(
        self,
        parser: Optional[MessageNodeParser] = None,
        path_separator: str = ".",
    ):
        if len(path_separator) != 1:
            raise ValueError(
                f"Path separator must be a single character: {path_separator!r}"
            )
        self.parser = parser or MessageNodeParser()
        self.path_separator = path_separator

    def parse(self, node: Any) -> Dict[str, Message]:
        """Flatten a tree into path-keyed messages.

        Args:
            node: Root tree node.

        Returns:
            Mapping of path to Message, in document order. A root message
            node is recorded under the empty path.

        Raises:
            MessageParseError: If a message node is malformed.
        """
        result: Dict[str, Message] = {}
        self._walk(node, result, "")
        return result

    def _walk(self, node: Any, result: Dict[str, Message], path: str) -> None:
        if node is None:
            return

        if self.parser.is_message_node(node):
            result[path] = self.parser.parse(node)
            return

        if node_kind(node) is not NodeKind.OBJECT:
            logger.warning(
                "skipped_unsupported_node",
                path=path,
                node_type=type(node).__name__,
            )
            return

        for field, value in node.items():
            name = as_text(field)
            child_path = f"{path}{self.path_separator}{name}" if path else name
            self._walk(value, result, child_path)


DEFAULT_NODE_PARSER = MessageNodeParser()
DEFAULT_MAP_PARSER = MessageMapParser(DEFAULT_NODE_PARSER)


def parse_message(node: Any) -> Message:
    """Parse a node into a Message with the default parser (strict)."""
    return DEFAULT_NODE_PARSER.parse(node)


def parse_message_map(node: Any, path_separator: str = ".") -> Dict[str, Message]:
    """Flatten a tree into path-keyed messages."""
    if path_separator == DEFAULT_MAP_PARSER.path_separator:
        return DEFAULT_MAP_PARSER.parse(node)
    return MessageMapParser(DEFAULT_NODE_PARSER, path_separator).parse(node)
