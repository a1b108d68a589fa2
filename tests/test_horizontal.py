from textwrap import dedent

from acidtab import Align, Close, Table, display_width


def golden(text: str) -> str:
    """Remove indentation and the leading newline from an expected table."""
    return dedent(text).lstrip("\n")


class TestHorizontal:
    def test_closed_sides(self) -> None:
        table = (
            Table("one", "two")
            .set_close(Close.LEFT | Close.RIGHT)
            .append_rows("aa1", "aa2", "bb1", "bb2")
        )
        assert str(table) == golden(
            """
            │  one  │  two  │
            ├───────┼───────┤
            │  aa1  │  aa2  │
            │  bb1  │  bb2  │
            """
        )

    def test_closed_all(self) -> None:
        table = (
            Table("one", "two")
            .set_close(Close.ALL)
            .append_rows("aa1", "aa2", "bb1", "bb2")
        )
        assert str(table) == golden(
            """
            ┌───────┬───────┐
            │  one  │  two  │
            ├───────┼───────┤
            │  aa1  │  aa2  │
            │  bb1  │  bb2  │
            └───────┴───────┘
            """
        )

    def test_open(self) -> None:
        table = Table("one", "two").append_rows("aa1", "aa2", "bb1", "bb2")
        assert str(table) == golden(
            """
              one  │  two
            ───────┼───────
              aa1  │  aa2
              bb1  │  bb2
            """
        )

    def test_ascii_borders(self) -> None:
        table = (
            Table("one", "two")
            .set_close(Close.ALL)
            .set_borders("ascii")
            .append_row("aa1", "aa2")
        )
        assert str(table) == golden(
            """
            +-------+-------+
            |  one  |  two  |
            +-------+-------+
            |  aa1  |  aa2  |
            +-------+-------+
            """
        )

    def test_heavy_borders(self) -> None:
        table = (
            Table("a")
            .set_close(Close.ALL)
            .set_borders("heavy")
            .set_pad(" ")
            .append_row("x")
        )
        assert str(table) == golden(
            """
            ┏━━━┓
            ┃ a ┃
            ┣━━━┫
            ┃ x ┃
            ┗━━━┛
            """
        )

    def test_hidden_header(self) -> None:
        table = (
            Table("one", "two")
            .set_close(Close.LEFT | Close.RIGHT)
            .set_header(False)
            .append_row("aa1", "aa2")
        )
        assert str(table) == "│  aa1  │  aa2  │\n"

    def test_prefix(self) -> None:
        table = (
            Table("one")
            .set_close(Close.LEFT | Close.RIGHT)
            .set_prefix("> ")
            .append_row("aa1")
        )
        assert str(table) == golden(
            """
            > │  one  │
            > ├───────┤
            > │  aa1  │
            """
        )

    def test_short_row(self) -> None:
        table = (
            Table("one", "two")
            .set_close(Close.LEFT | Close.RIGHT)
            .set_header(False)
            .append_row("a")
        )
        assert str(table) == "│  a    │       │\n"

    def test_short_row_open_right(self) -> None:
        table = Table("one", "two").set_header(False).append_row("a")
        assert str(table) == "  a    │  \n"

    def test_empty(self) -> None:
        table = Table("one", "two").set_close(Close.ALL)
        assert str(table) == golden(
            """
            ┌───────┬───────┐
            │  one  │  two  │
            ├───────┼───────┤
            └───────┴───────┘
            """
        )


class TestAlignment:
    def test_auto(self) -> None:
        table = (
            Table("int", "float", "int64", "uint", "-- complex --", "forceleft")
            .set_close(Close.LEFT | Close.RIGHT)
            .set_align(5, Align.LEFT)
            .append_row(1, 1.1, -2, 3, complex(5, 6), 9)
        )
        assert table.error is None
        assert str(table) == golden(
            """
            │  int  │  float  │  int64  │  uint  │  -- complex --  │  forceleft  │
            ├───────┼─────────┼─────────┼────────┼─────────────────┼─────────────┤
            │    1  │    1.1  │     -2  │     3  │         (5+6j)  │  9          │
            """
        )

    def test_center_even_and_odd_slack(self) -> None:
        table = (
            Table("abcde")
            .set_close(Close.LEFT | Close.RIGHT)
            .set_header(False)
            .set_align(0, Align.CENTER)
            .append_rows("abc", "ab")
        )
        assert str(table) == golden(
            """
            │   abc   │
            │   ab    │
            """
        )

    def test_center_open_right(self) -> None:
        table = (
            Table("abcde")
            .set_header(False)
            .set_align(0, Align.CENTER)
            .append_rows("abc", "ab")
        )
        assert str(table) == "   abc\n   ab\n"

    def test_right(self) -> None:
        table = (
            Table("number")
            .set_close(Close.LEFT | Close.RIGHT)
            .set_header(False)
            .append_rows(1, 100)
        )
        assert str(table) == golden(
            """
            │       1  │
            │     100  │
            """
        )

    def test_header_always_centered(self) -> None:
        table = (
            Table("n")
            .set_close(Close.LEFT | Close.RIGHT)
            .append_row("long value")
        )
        assert str(table).splitlines()[0] == "│      n       │"


class TestWidth:
    def table(self) -> Table:
        def bold(s: str) -> str:
            return "\x1b[1m" + s + "\x1b[0m"

        def alive(value: object) -> str | None:
            if isinstance(value, bool):
                return "\x1b[32m ✔ \x1b[0m" if value else "\x1b[31m✘\x1b[0m"
            return None

        return (
            Table(bold("Name"), bold("Origin"), bold("Job"), bold("Alive"))
            .set_align(3, Align.CENTER)
            .set_format_func(3, alive)
            .append_rows("James Holden", "Montana 🌎", "Captain 🚀", True)
        )

    def test_width(self) -> None:
        table = self.table()
        assert table.error is None
        assert table.width() == 56
        assert table.set_close(Close.LEFT).width() == 57
        assert table.set_close(Close.LEFT | Close.RIGHT).width() == 58

    def test_wide_and_coloured_cells(self) -> None:
        table = self.table().set_close(Close.LEFT | Close.RIGHT)
        assert str(table) == (
            "│      \x1b[1mName\x1b[0m      │    \x1b[1mOrigin\x1b[0m    "
            "│     \x1b[1mJob\x1b[0m      │  \x1b[1mAlive\x1b[0m  │\n"
            "├────────────────┼──────────────┼──────────────┼─────────┤\n"
            "│  James Holden  │  Montana 🌎  │  Captain 🚀  │   \x1b[32m ✔ \x1b[0m   │\n"
        )

    def test_width_matches_output(self) -> None:
        table = self.table().set_close(Close.ALL).set_prefix("  ")
        table.append_rows("Amos Burton", "Baltimore", "Mechanic", False)
        lines = str(table).splitlines()
        assert len(lines) == 6
        for line in lines:
            assert display_width(line) == table.width()

    def test_width_without_columns(self) -> None:
        assert Table().width() == 0
        assert Table().set_close(Close.ALL).width() == 1
