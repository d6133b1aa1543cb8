from autodrive_sim.config.constants import (
    COLLISION_EXPLANATION,
    COMMAND_ALPHABET,
    DEFAULT_CAR_NAME,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    INVALID_COMMAND_FORMAT,
    NO_COLLISION_MESSAGE,
    ORIENTATIONS,
)
from autodrive_sim.domain.commands import Command
from autodrive_sim.domain.orientation import Orientation


def test_field_dimensions_are_positive_ints() -> None:
    assert isinstance(FIELD_WIDTH, int) and FIELD_WIDTH > 0
    assert isinstance(FIELD_HEIGHT, int) and FIELD_HEIGHT > 0


def test_command_alphabet_matches_enum() -> None:
    assert set(COMMAND_ALPHABET) == {c.value for c in Command}


def test_orientations_are_clockwise() -> None:
    assert ORIENTATIONS == tuple(o.value for o in Orientation)
    for current, following in zip(ORIENTATIONS, ORIENTATIONS[1:] + ORIENTATIONS[:1]):
        assert Orientation(current).turn_right() is Orientation(following)


def test_default_car_name_is_non_empty() -> None:
    assert DEFAULT_CAR_NAME.strip()


def test_no_collision_message() -> None:
    assert NO_COLLISION_MESSAGE == "No collision"


def test_message_templates_have_placeholders() -> None:
    assert "{char}" in INVALID_COMMAND_FORMAT
    for key in ("{cars}", "{x}", "{y}", "{step}"):
        assert key in COLLISION_EXPLANATION
