import pytest

from essy.registers import InvalidRegisterError, register_number


@pytest.mark.parametrize(
    "name, number",
    [("A", 0), ("X", 1), ("L", 2), ("B", 3), ("S", 4), ("T", 5), ("F", 6), ("PC", 8), ("SW", 9)],
)
def test_register_numbers(name, number):
    assert register_number(name) == number


def test_register_numbers_are_distinct():
    names = ["A", "X", "L", "B", "S", "T", "F", "PC", "SW"]
    assert len({register_number(n) for n in names}) == len(names)


@pytest.mark.parametrize("name", ["", "a", "Y", "P", " A", "A ", "R1"])
def test_unknown_register_raises(name):
    with pytest.raises(InvalidRegisterError) as excinfo:
        register_number(name)
    assert excinfo.value.name == name


def test_error_message_names_register():
    with pytest.raises(InvalidRegisterError, match="Invalid Register: 'Q'"):
        register_number("Q")


def test_error_is_value_error():
    with pytest.raises(ValueError):
        register_number("ZZ")