"""Tests for the command box widget."""

from textual.app import App, ComposeResult

from cmdbox.tui.widgets.command_box import CommandBox, single_line


class CommandBoxApp(App[None]):
    """Minimal app for testing CommandBox."""

    submitted_texts: list[str]

    def __init__(self) -> None:
        super().__init__()
        self.submitted_texts = []

    def compose(self) -> ComposeResult:
        yield CommandBox()

    def on_command_box_submitted(self, event: CommandBox.Submitted) -> None:
        self.submitted_texts.append(event.text)


async def submit(pilot, text: str) -> None:
    """Type text into the focused box and press enter."""
    await pilot.press(*text)
    await pilot.pause()
    await pilot.press("enter")
    await pilot.pause()


class TestCommandBox:
    """Tests for CommandBox."""

    async def test_typing_updates_draft(self) -> None:
        """User edits are written into the entry under the cursor."""
        async with CommandBoxApp().run_test() as pilot:
            box = pilot.app.query_one(CommandBox)
            box.focus()
            await pilot.press("a", "b")
            await pilot.pause()
            assert box.command_history.entries == ("ab",)
            assert box.command_history.cursor == 0

    async def test_submit_posts_message_and_clears(self) -> None:
        """Enter submits the text and empties the box."""
        async with CommandBoxApp().run_test() as pilot:
            box = pilot.app.query_one(CommandBox)
            box.focus()
            await submit(pilot, "hello")
            assert pilot.app.submitted_texts == ["hello"]
            assert box.text == ""

    async def test_submit_records_history(self) -> None:
        """Submission commits the text and opens an empty draft.

        The seed slot holds what was typed before the first submission, so it
        ends up equal to the first command.
        """
        async with CommandBoxApp().run_test() as pilot:
            box = pilot.app.query_one(CommandBox)
            box.focus()
            await submit(pilot, "one")
            assert box.command_history.entries == ("one", "one", "")
            await submit(pilot, "two")
            assert box.command_history.entries == ("one", "one", "two", "")
            assert box.command_history.cursor == 3

    async def test_empty_input_not_submitted(self) -> None:
        """Enter on an empty box does nothing."""
        async with CommandBoxApp().run_test() as pilot:
            box = pilot.app.query_one(CommandBox)
            box.focus()
            await pilot.press("enter")
            await pilot.pause()
            assert pilot.app.submitted_texts == []
            assert box.command_history.entries == ("",)

    async def test_up_and_down_browse_history(self) -> None:
        """Arrow keys show older and newer entries."""
        async with CommandBoxApp().run_test() as pilot:
            box = pilot.app.query_one(CommandBox)
            box.focus()
            await submit(pilot, "one")
            await submit(pilot, "two")
            await pilot.press("up")
            assert box.text == "two"
            await pilot.press("up")
            assert box.text == "one"
            await pilot.press("down")
            assert box.text == "two"
            await pilot.press("down")
            assert box.text == ""

    async def test_browsing_does_not_edit_history(self) -> None:
        """Showing an entry is not counted as a user edit."""
        async with CommandBoxApp().run_test() as pilot:
            box = pilot.app.query_one(CommandBox)
            box.focus()
            await submit(pilot, "one")
            await submit(pilot, "two")
            await pilot.press("up", "up", "down", "down")
            await pilot.pause()
            assert box.command_history.entries == ("one", "one", "two", "")

    async def test_draft_preserved_while_browsing(self) -> None:
        """Text typed before browsing comes back on returning to the tail."""
        async with CommandBoxApp().run_test() as pilot:
            box = pilot.app.query_one(CommandBox)
            box.focus()
            await submit(pilot, "one")
            await pilot.press("d", "r")
            await pilot.pause()
            await pilot.press("up")
            assert box.text == "one"
            await pilot.press("down")
            assert box.text == "dr"

    async def test_editing_past_entry_rewrites_it(self) -> None:
        """Editing while browsing changes the stored past entry."""
        async with CommandBoxApp().run_test() as pilot:
            box = pilot.app.query_one(CommandBox)
            box.focus()
            await submit(pilot, "one")
            await pilot.press("up")
            await pilot.press("x")
            await pilot.pause()
            assert box.text == "onex"
            assert box.command_history.entries == ("one", "onex", "")
            assert box.command_history.cursor == 1

    async def test_up_at_oldest_stays(self) -> None:
        """Up past the oldest entry keeps showing it."""
        async with CommandBoxApp().run_test() as pilot:
            box = pilot.app.query_one(CommandBox)
            box.focus()
            await submit(pilot, "one")
            await pilot.press("up", "up", "up")
            assert box.text == "one"
            assert box.command_history.cursor == 0

    async def test_failure_style_cleared_by_typing(self) -> None:
        """The error class is removed on the next edit."""
        async with CommandBoxApp().run_test() as pilot:
            box = pilot.app.query_one(CommandBox)
            box.focus()
            box.indicate_failure()
            assert box.has_class("error")
            await pilot.press("a")
            await pilot.pause()
            assert not box.has_class("error")

    async def test_failure_style_cleared_by_navigation(self) -> None:
        """Showing a history entry also resets the error style."""
        async with CommandBoxApp().run_test() as pilot:
            box = pilot.app.query_one(CommandBox)
            box.focus()
            await submit(pilot, "one")
            box.indicate_failure()
            await pilot.press("up")
            assert not box.has_class("error")

    async def test_shift_enter_does_not_insert_newline(self) -> None:
        """The box stays single-line."""
        async with CommandBoxApp().run_test() as pilot:
            box = pilot.app.query_one(CommandBox)
            box.focus()
            await pilot.press("a", "shift+enter", "b")
            await pilot.pause()
            assert box.text == "ab"

    async def test_inserted_line_breaks_become_spaces(self) -> None:
        """Multi-line text from a paste is flattened before it reaches history."""
        async with CommandBoxApp().run_test() as pilot:
            box = pilot.app.query_one(CommandBox)
            box.focus()
            box.insert("a\nb")
            await pilot.pause()
            assert box.text == "a b"
            assert box.command_history.entries == ("a b",)

    async def test_inserted_line_breaks_not_submitted(self) -> None:
        """Submitted text never contains a newline."""
        async with CommandBoxApp().run_test() as pilot:
            box = pilot.app.query_one(CommandBox)
            box.focus()
            box.insert("find\nn/alice")
            await pilot.pause()
            await pilot.press("enter")
            await pilot.pause()
            assert pilot.app.submitted_texts == ["find n/alice"]
            assert box.command_history.entries == ("find n/alice", "find n/alice", "")


def test_single_line_joins_lines() -> None:
    """Line breaks of any style become single spaces."""
    assert single_line("a\nb\r\nc") == "a b c"
    assert single_line("plain") == "plain"
    assert single_line("\n") == ""
