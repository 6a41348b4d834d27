from wordle_widget.config.game_settings import FAILURE_MESSAGE, START_MESSAGE, SUCCESS_MESSAGE
from wordle_widget.models.game import GameConfig
from wordle_widget.services.game_machine import apply_input, apply_submit, start_session
from wordle_widget.services.grid_presenter import banner_message, column_round, render_grid


def submit(session, word):
    return apply_submit(apply_input(session, word))


def statuses(column):
    return [cell.status for cell in column.cells]


def test_empty_board_dimensions(session):
    grid = render_grid(session)

    assert (grid.rows, grid.columns) == (5, 6)
    assert len(grid.column_views) == 6
    assert all(len(column.cells) == 5 for column in grid.column_views)
    assert [column.active for column in grid.column_views] == [True] + [False] * 5


def test_columns_map_to_rounds(session):
    grid = render_grid(session)

    for column in grid.column_views:
        assert column.round_index == column_round(column.column)


def test_current_round_letters_are_not_classified(session):
    grid = render_grid(apply_input(session, "CRA"))
    column = grid.column_views[0]

    assert [cell.letter for cell in column.cells] == ["C", "R", "A", None, None]
    assert statuses(column) == [None] * 5


def test_crate_scenario(session):
    session = submit(session, "CRATE")
    grid = render_grid(session)

    assert statuses(grid.column_views[0]) == ["EXACT", "EXACT", "EXACT", "ABSENT", "EXACT"]
    assert grid.column_views[1].active
    assert not grid.column_views[0].active
    assert session.state.current_round == 1


def test_past_rows_keep_their_classification(session):
    session = submit(session, "CRATE")
    first = statuses(render_grid(session).column_views[0])

    session = submit(session, "NACRE")
    session = apply_input(session, "WRO")
    grid = render_grid(session)

    assert statuses(grid.column_views[0]) == first
    assert statuses(grid.column_views[1]) == ["PARTIAL", "PARTIAL", "PARTIAL", "PARTIAL", "EXACT"]
    assert grid.column_views[2].active


def test_failure_board_has_no_active_column():
    session = submit(start_session(GameConfig.for_word("CRANE", 1)), "WRONG")
    grid = render_grid(session)

    assert not any(column.active for column in grid.column_views)
    assert statuses(grid.column_views[0]) == ["ABSENT", "EXACT", "ABSENT", "EXACT", "ABSENT"]


def test_banner_messages(session):
    assert banner_message(session) == START_MESSAGE
    assert banner_message(apply_input(session, "C")) is None
    assert banner_message(submit(session, "CRATE")) is None
    assert banner_message(submit(session, "CRANE")) == SUCCESS_MESSAGE

    lost = submit(start_session(GameConfig.for_word("CRANE", 1)), "WRONG")
    assert banner_message(lost) == FAILURE_MESSAGE
