import logging

import pytest

from gargamel import (
    ArgumentStyle,
    DuplicatePolicy,
    InvalidOptionFormatError,
    OptionExistsError,
    OptionSpec,
    OptionSpecException,
    OptionTable,
    describe_arg,
    describe_arg_array,
    describe_arg_default,
)
from gargamel.options import parse_option_format


def test_describe_helpers():
    spec = describe_arg(1, "h", "help", ArgumentStyle.NO_ARGUMENT, "Print help")
    assert spec == OptionSpec(1, "h", "help", ArgumentStyle.NO_ARGUMENT, False, "", "Print help")
    assert spec.has_short() and spec.has_long() and not spec.takes_argument()

    spec = describe_arg_default(2, None, "name", ArgumentStyle.REQUIRED_ARGUMENT, "anon")
    assert spec.short_name == "" and not spec.has_short()
    assert spec.default_value == "anon"

    spec = describe_arg_array(3, "tag", "Tags")
    assert spec.is_array is True
    assert spec.style == ArgumentStyle.REQUIRED_ARGUMENT
    assert spec.short_name == ""


def test_spec_is_immutable():
    spec = describe_arg(1, "h", "help", ArgumentStyle.NO_ARGUMENT)
    with pytest.raises(AttributeError):
        spec.long_name = "other"


def test_table_is_sized_and_ordered():
    specs = [describe_arg(i, "", f"opt{i}", ArgumentStyle.NO_ARGUMENT) for i in (5, 1, 3)]
    table = OptionTable(specs)
    assert len(table) == 3
    assert list(table) == specs
    assert table[1].id == 1
    assert table.ids() == [5, 1, 3]


@pytest.mark.parametrize("opts, expected", [
    ("h,help", ("h", "help")),
    ("h", ("h", "")),
    ("help", ("", "help")),
    ("o,dry-run", ("o", "dry-run")),
    ("x,y", ("x", "y")),
])
def test_option_format(opts, expected):
    assert parse_option_format(opts) == expected


@pytest.mark.parametrize("opts", ["", "h,", ",help", "hh,help", "-h", "--help"])
def test_invalid_option_format(opts):
    with pytest.raises(InvalidOptionFormatError):
        parse_option_format(opts)


def test_add_options_chain():
    table = OptionTable()
    table.add_options()(1, "h,help", "Print help")(2, "o,output", "Output file", ArgumentStyle.REQUIRED_ARGUMENT, "out.txt")
    assert len(table) == 2
    assert table[1] == OptionSpec(2, "o", "output", ArgumentStyle.REQUIRED_ARGUMENT, False, "out.txt", "Output file")
    assert table.find_short("o") == [table[1]]
    assert table.find_long("help") == [table[0]]
    assert table.find_long("nope") == []


def test_reject_duplicates():
    table = OptionTable(policy=DuplicatePolicy.REJECT)
    table.add(describe_arg(1, "v", "verbose", ArgumentStyle.NO_ARGUMENT))
    with pytest.raises(OptionExistsError, match="-v"):
        table.add(describe_arg(2, "v", "version", ArgumentStyle.NO_ARGUMENT))
    with pytest.raises(OptionExistsError, match="--verbose"):
        table.add(describe_arg(3, "", "verbose", ArgumentStyle.NO_ARGUMENT))
    with pytest.raises(OptionExistsError, match="id 1"):
        table.add(describe_arg(1, "", "other", ArgumentStyle.NO_ARGUMENT))
    assert len(table) == 1


def test_warn_duplicates(caplog):
    with caplog.at_level(logging.WARNING, logger="gargamel.options"):
        table = OptionTable([
            describe_arg(1, "q", "quiet", ArgumentStyle.NO_ARGUMENT),
            describe_arg(2, "q", "silent", ArgumentStyle.NO_ARGUMENT),
        ])
    assert len(table) == 2
    assert "‘-q’ already exists" in caplog.text


def test_allow_duplicates_is_silent(caplog):
    with caplog.at_level(logging.WARNING, logger="gargamel.options"):
        OptionTable([
            describe_arg(1, "q", "quiet", ArgumentStyle.NO_ARGUMENT),
            describe_arg(1, "q", "quiet", ArgumentStyle.NO_ARGUMENT),
        ], policy=DuplicatePolicy.ALLOW)
    assert caplog.records == []


def test_validate_whole_table():
    table = OptionTable([
        describe_arg(1, "q", "quiet", ArgumentStyle.NO_ARGUMENT),
        describe_arg(2, "q", "quiet", ArgumentStyle.NO_ARGUMENT),
    ], policy=DuplicatePolicy.ALLOW)
    assert table.validate() == ["-q", "--quiet"]
    with pytest.raises(OptionExistsError):
        table.validate(DuplicatePolicy.REJECT)


def test_bad_specs_are_rejected():
    with pytest.raises(OptionSpecException):
        OptionTable([OptionSpec(1, "ab", "", ArgumentStyle.NO_ARGUMENT)])
    with pytest.raises(OptionSpecException):
        OptionTable([OptionSpec(1, "", "tags", ArgumentStyle.NO_ARGUMENT, True)])


def test_null_character_means_no_short_name():
    spec = describe_arg(1, "\0", "help", ArgumentStyle.NO_ARGUMENT)
    assert spec.short_name == ""
    assert not spec.has_short()
    assert not OptionSpec(2, "\0", "quiet").has_short()

    table = OptionTable([OptionSpec(1, "\0", "help"), OptionSpec(2, "\0", "quiet")], policy=DuplicatePolicy.REJECT)
    assert table.find_short("\0") == []
