"""
Grid Presenter

Renders a session to the board: one column per round, one row per letter
position. Holds no state; every call recomputes from the session.
"""

from typing import Optional
from ..config.game_settings import FAILURE_MESSAGE, START_MESSAGE, SUCCESS_MESSAGE
from ..models.game import GridCell, GridColumn, GridView
from .classifier import classify
from .game_machine import GameSession


def column_round(column: int) -> int:
    """Round index shown in a grid column. Columns are laid out in round order."""
    return column


def render_column(session: GameSession, column: int) -> GridColumn:
    rows, _ = session.config.grid_dimensions
    round_index = column_round(column)
    current_round = session.state.current_round
    letters = session.guesses.get_letters(round_index)
    completed = round_index < current_round

    cells = []
    for row in range(rows):
        letter = letters[row] if row < len(letters) else None
        status = None
        if letter is not None and completed:
            status = classify(letters, session.config.target_word, row).value
        cells.append(GridCell(row=row, letter=letter, status=status))

    return GridColumn(
        column=column,
        round_index=round_index,
        active=round_index == current_round,
        cells=cells,
    )


def render_grid(session: GameSession) -> GridView:
    """Builds the full board for a session."""
    rows, columns = session.config.grid_dimensions
    return GridView(
        rows=rows,
        columns=columns,
        column_views=[render_column(session, column) for column in range(columns)],
    )


def banner_message(session: GameSession) -> Optional[str]:
    """Message shown under the board, if any."""
    state = session.state
    if state.is_success:
        return SUCCESS_MESSAGE
    if state.is_failure:
        return FAILURE_MESSAGE
    if not state.input_buffer and state.current_round == 0:
        return START_MESSAGE
    return None
