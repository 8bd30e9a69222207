"""Tests for parley.messages.parser.MessageNodeParser."""

from datetime import date, timedelta

import pytest

from parley.exceptions import MessageParseError
from parley.messages import (
    EMPTY,
    RESET_TITLE,
    ActionbarMessage,
    CompositeMessage,
    MessageNodeParser,
    SoundMessage,
    TextMessage,
    TitleMessage,
    is_message_node,
    parse_message,
)
from tests.factories.messages import make_sound_message, make_title_message


@pytest.fixture
def parser():
    return MessageNodeParser()


class TestIsMessageNode:
    """Tests for the shared node classification."""

    @pytest.mark.parametrize(
        "node",
        [
            [],
            [{"text": "a"}],
            {"text": "Hello"},
            {"actionbar": "Hello"},
            {"sound": "entity.pig.ambient"},
            {"title": "Title", "subtitle": "Subtitle"},
            {"fadein": "1s"},
            {"fade-out": "1s"},
            True,
            123,
            1.5,
            "Hello",
            None,
        ],
    )
    def test_message_nodes(self, node):
        """Arrays, scalars, null and objects with reserved fields are messages."""
        assert is_message_node(node)

    @pytest.mark.parametrize("node", [{}, {"invalid": "value"}, date(2024, 1, 1)])
    def test_non_message_nodes(self, node):
        """Objects without reserved fields and unknown types are not messages."""
        assert not is_message_node(node)


class TestParseObjects:
    """Tests for object classification order and field reading."""

    def test_text(self, parser):
        """An object with text parses as TextMessage."""
        assert parser.parse({"text": "Hello, world!"}) == TextMessage("Hello, world!")

    def test_null_text_is_empty(self, parser):
        """A null text field parses as EMPTY, not the string 'null'."""
        assert parser.parse({"text": None}) == EMPTY

    def test_numeric_text_is_coerced(self, parser):
        """Scalar text values are coerced to strings."""
        assert parser.parse({"text": 42}) == TextMessage("42")

    def test_actionbar(self, parser):
        """An object with actionbar parses as ActionbarMessage."""
        assert parser.parse({"actionbar": "Action!"}) == ActionbarMessage("Action!")

    def test_text_wins_over_other_fields(self, parser):
        """text is checked before actionbar, sound and title."""
        node = {"actionbar": "x", "sound": "y", "title": "z", "text": "t"}
        assert parser.parse(node) == TextMessage("t")

    def test_actionbar_wins_over_sound(self, parser):
        """actionbar is checked before sound."""
        assert parser.parse({"sound": "y", "actionbar": "x"}) == ActionbarMessage("x")

    def test_sound_with_textual_numbers(self, parser):
        """Sound numeric fields are read from their textual form."""
        node = {
            "sound": "minecraft:entity.pig.ambient",
            "source": "player",
            "volume": "2.0",
            "pitch": "1.5",
            "seed": "123456789",
        }
        assert parser.parse(node) == make_sound_message()

    def test_sound_with_native_numbers(self, parser):
        """Native JSON numbers are accepted as well."""
        node = {"sound": "a:b", "volume": 2, "pitch": 0.5, "seed": 7}
        assert parser.parse(node) == SoundMessage("a:b", volume=2.0, pitch=0.5, seed=7)

    def test_sound_defaults(self, parser):
        """Missing sound fields take their defaults."""
        assert parser.parse({"sound": "a:b"}) == SoundMessage("a:b")

    def test_sound_invalid_volume_raises(self, parser):
        """Non-numeric volume is a parse error."""
        with pytest.raises(MessageParseError):
            parser.parse({"sound": "a:b", "volume": "loud"})

    def test_sound_invalid_seed_raises(self, parser):
        """Non-integer seed is a parse error."""
        with pytest.raises(MessageParseError):
            parser.parse({"sound": "a:b", "seed": "1.5"})

    @pytest.mark.parametrize("seed", [str(2**64), -(2**63) - 1, 2**63])
    def test_sound_seed_out_of_range_raises(self, parser, seed):
        """Seeds must fit in a signed 64-bit integer."""
        with pytest.raises(MessageParseError, match="out of range"):
            parser.parse({"sound": "a:b", "seed": seed})

    def test_sound_seed_bounds_are_accepted(self, parser):
        """The signed 64-bit extremes are valid seeds."""
        assert parser.parse({"sound": "a:b", "seed": 2**63 - 1}).seed == 2**63 - 1
        assert parser.parse({"sound": "a:b", "seed": str(-(2**63))}).seed == -(2**63)

    @pytest.mark.parametrize(
        "node",
        [
            {"text": {"a": 1}},
            {"text": ["a"]},
            {"actionbar": [1]},
            {"sound": {"x": 1}},
            {"title": {"a": 1}},
            {"subtitle": ["a", "b"]},
            {"title": "Hi", "stay": {"s": 1}},
        ],
    )
    def test_non_scalar_field_value_raises(self, parser, node):
        """Objects and arrays are rejected where a scalar is expected."""
        with pytest.raises(MessageParseError, match="must be a scalar"):
            parser.parse(node)

    def test_title_with_hyphenated_fields(self, parser):
        """Title timings are read from fade-in/stay/fade-out."""
        node = {
            "title": "Welcome!",
            "subtitle": "To this amazing server",
            "fade-in": "1s",
            "stay": "2s",
            "fade-out": "3s",
        }
        assert parser.parse(node) == make_title_message()

    def test_title_with_short_field_names(self, parser):
        """fadein/fadeout are accepted as alternatives."""
        node = {
            "title": "Welcome!",
            "subtitle": "To this amazing server",
            "fadein": "1s",
            "stay": "2s",
            "fadeout": "3s",
        }
        assert parser.parse(node) == make_title_message()

    def test_hyphenated_field_takes_precedence(self, parser):
        """fade-in wins when both spellings are present."""
        message = parser.parse({"fade-in": "1s", "fadein": "9s"})
        assert message.fade_in == timedelta(seconds=1)

    def test_partial_title(self, parser):
        """Absent title fields stay None."""
        assert parser.parse({"title": "Hi"}) == TitleMessage(title="Hi")

    def test_all_null_title_fields_is_reset(self, parser):
        """Present but null title fields produce the reset title."""
        assert parser.parse({"title": None, "stay": None}) == RESET_TITLE

    def test_invalid_title_duration_raises(self, parser):
        """A malformed duration is a parse error for the whole message."""
        with pytest.raises(MessageParseError):
            parser.parse({"title": "Hi", "stay": "forever"})

    def test_title_duration_out_of_range_raises(self, parser):
        """Durations beyond timedelta's range are parse errors."""
        with pytest.raises(MessageParseError, match="out of range"):
            parser.parse({"title": "Hi", "stay": "99999999999999999999s"})

    def test_object_without_reserved_fields_raises(self, parser):
        """Strict parsing rejects unknown objects."""
        with pytest.raises(MessageParseError, match="Cannot parse node"):
            parser.parse({"test": 1})

    def test_empty_object_raises(self, parser):
        """Strict parsing rejects an empty object."""
        with pytest.raises(MessageParseError):
            parser.parse({})


class TestParseOtherNodes:
    """Tests for non-object node kinds."""

    def test_array(self, parser):
        """Arrays parse element-wise into a CompositeMessage."""
        node = [{"text": "Hello"}, {"actionbar": "World"}]
        assert parser.parse(node) == CompositeMessage(
            [TextMessage("Hello"), ActionbarMessage("World")]
        )

    def test_empty_array(self, parser):
        """An empty array parses as an empty composite."""
        assert parser.parse([]) == CompositeMessage(())

    def test_nested_array(self, parser):
        """Arrays nest."""
        assert parser.parse([["a"], "b"]) == CompositeMessage(
            [CompositeMessage([TextMessage("a")]), TextMessage("b")]
        )

    def test_array_with_invalid_element_raises(self, parser):
        """A bad element fails the whole array; no partial composite."""
        with pytest.raises(MessageParseError):
            parser.parse([{"text": "ok"}, {"bad": 1}])

    @pytest.mark.parametrize(
        "node,expected",
        [
            (True, TextMessage("true")),
            (False, TextMessage("false")),
            (None, EMPTY),
            (123, TextMessage("123")),
            (1.5, TextMessage("1.5")),
            ("Hello", TextMessage("Hello")),
        ],
    )
    def test_scalars(self, parser, node, expected):
        """Scalars parse as text; null parses as EMPTY."""
        assert parser.parse(node) == expected

    def test_unsupported_type_raises(self, parser):
        """Types outside the tree model are rejected."""
        with pytest.raises(MessageParseError, match="Unsupported node type"):
            parser.parse(date(2024, 1, 1))

    def test_module_level_parse(self):
        """parse_message() uses the default strict parser."""
        assert parse_message({"text": "hi"}) == TextMessage("hi")


class TestParseLenient:
    """Tests for lenient parsing."""

    def test_unknown_object_returns_none(self, parser):
        """Unknown objects yield None instead of raising."""
        assert parser.parse_lenient({"nested": {"text": "hi"}}) is None

    def test_unsupported_type_returns_none(self, parser):
        """Unknown types yield None."""
        assert parser.parse_lenient(date(2024, 1, 1)) is None

    def test_message_object_parses(self, parser):
        """Recognised objects parse as usual."""
        assert parser.parse_lenient({"actionbar": "x"}) == ActionbarMessage("x")

    def test_malformed_field_still_raises(self, parser):
        """Leniency only covers classification, not bad field values."""
        with pytest.raises(MessageParseError):
            parser.parse_lenient({"stay": "nope"})
