import pytest

from flagparser.option import (
    Option,
    OptionKind,
    OptionType,
    new_early_option,
    new_long_option_with_argument_optional,
    new_option_with_argument_none,
    new_option_with_argument_required,
)


def test_option_type_kinds():
    assert OptionType.EARLY_ARGUMENT_NONE.kind is OptionKind.EARLY
    assert OptionType.STANDALONE_ARGUMENT_NONE.kind is OptionKind.STANDALONE
    assert OptionType.STANDALONE_ARGUMENT_REQUIRED.kind is OptionKind.STANDALONE
    assert OptionType.STANDALONE_ARGUMENT_OPTIONAL.kind is OptionKind.STANDALONE
    assert OptionType.GROUPABLE_ARGUMENT_NONE.kind is OptionKind.GROUPABLE
    assert OptionType.GROUPABLE_ARGUMENT_REQUIRED.kind is OptionKind.GROUPABLE


def test_option_type_predicates():
    assert OptionType.EARLY_ARGUMENT_NONE.is_early()
    assert not OptionType.EARLY_ARGUMENT_NONE.is_standalone()
    assert not OptionType.EARLY_ARGUMENT_NONE.is_groupable()
    assert OptionType.STANDALONE_ARGUMENT_OPTIONAL.is_standalone()
    assert OptionType.GROUPABLE_ARGUMENT_REQUIRED.is_groupable()
    assert not OptionType.GROUPABLE_ARGUMENT_REQUIRED.is_early()


def test_option_type_aliases():
    assert OptionType("early") is OptionType.EARLY_ARGUMENT_NONE
    assert OptionType("flag") is OptionType.STANDALONE_ARGUMENT_NONE
    assert OptionType("short_flag") is OptionType.GROUPABLE_ARGUMENT_NONE
    assert (
        OptionType(" Standalone-Argument-Required ")
        is OptionType.STANDALONE_ARGUMENT_REQUIRED
    )
    assert str(OptionType.GROUPABLE_ARGUMENT_NONE) == "groupable_argument_none"
    assert len(OptionType.choices()) == 6


def test_option_type_invalid():
    with pytest.raises(ValueError):
        OptionType("bogus")
    with pytest.raises(ValueError):
        OptionType(42)


def test_option_is_immutable():
    option = Option(prefix="--", name="verbose", type=OptionType.STANDALONE_ARGUMENT_NONE)
    assert option.flag() == "--verbose"
    assert str(option) == "--verbose"
    assert option.default_value == ""
    with pytest.raises(AttributeError):
        option.name = "quiet"


def test_new_option_with_argument_none():
    options = new_option_with_argument_none("v", "verbose")
    assert options == [
        Option(prefix="-", name="v", type=OptionType.GROUPABLE_ARGUMENT_NONE),
        Option(prefix="--", name="verbose", type=OptionType.STANDALONE_ARGUMENT_NONE),
    ]


def test_new_early_option():
    options = new_early_option("h", "help")
    assert options == [
        Option(prefix="-", name="h", type=OptionType.EARLY_ARGUMENT_NONE),
        Option(prefix="--", name="help", type=OptionType.EARLY_ARGUMENT_NONE),
    ]


def test_new_option_with_argument_required():
    options = new_option_with_argument_required("o", "output")
    assert options == [
        Option(prefix="-", name="o", type=OptionType.GROUPABLE_ARGUMENT_REQUIRED),
        Option(prefix="--", name="output", type=OptionType.STANDALONE_ARGUMENT_REQUIRED),
    ]


def test_new_long_option_with_argument_optional():
    options = new_long_option_with_argument_optional("http", "1.1")
    assert options == [
        Option(
            prefix="--",
            name="http",
            type=OptionType.STANDALONE_ARGUMENT_OPTIONAL,
            default_value="1.1",
        )
    ]
    assert new_long_option_with_argument_optional("", "1.1") == []


@pytest.mark.parametrize(
    "factory",
    [
        new_option_with_argument_none,
        new_early_option,
        new_option_with_argument_required,
    ],
)
def test_factories_skip_empty_names(factory):
    assert factory("", "") == []
    assert [option.name for option in factory("x", "")] == ["x"]
    assert [option.name for option in factory("", "long")] == ["long"]
