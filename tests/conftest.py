import pytest

from cmdspec import SpecArgumentParser, compile_spec

SPEC_TEXT = """
{
    #main
    #name: demo
    #desc: A demo program

    #arg
    meta: PRINT
    desc: Text to print
    type: string

    #flag
    long: conti
    short: c
    desc: Continue on error
    type: bool
    default: false
}
{
    #name: init
    #desc: Initialize something

    #arg
    meta: TARGET
    type: string

    #flag
    long: foo
    type: strings

    #flag
    short: q
    type: bool

    #flag
    long: bar
    type: bool
    default: true

    #flag
    long: baz
    short: b
    type: number
}
"""


@pytest.fixture
def spec_text():
    return SPEC_TEXT


@pytest.fixture
def program():
    return compile_spec(SPEC_TEXT)


@pytest.fixture
def simple_parser():
    """Main command only: PRINT positional and a -c/--conti toggle."""
    return SpecArgumentParser.from_text(
        """
        {
            #main
            #name: echoer
            #arg
            meta: PRINT
            type: string
            #flag
            long: conti
            short: c
            type: bool
            default: false
        }
        """
    )


@pytest.fixture
def make_parser():
    """Build a parser for a main command from `#flag`/`#arg` statements."""

    def _make_parser(body: str) -> SpecArgumentParser:
        return SpecArgumentParser.from_text(f"{{\n#main\n#name: prog\n{body}\n}}")

    return _make_parser
