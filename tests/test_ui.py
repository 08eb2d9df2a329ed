"""Headless tests for the PySide6 window and widgets."""

import pytest

from tictactoe.ui.board_widget import BoardWidget
from tictactoe.ui.main_window import TicTacToeWindow
from tictactoe.ui.move_list_widget import MoveListWidget
from tictactoe.game_logic import GameLogic


@pytest.fixture
def window(qapp):
    win = TicTacToeWindow()
    yield win
    win.close()
    win.deleteLater()


def click_move(window, move):
    for btn in window.move_list_widget.move_buttons:
        if btn.property("move") == move:
            btn.click()
            return
    raise AssertionError(f"no button for move {move}")


def test_cell_at_maps_coordinates(qapp):
    board = BoardWidget(GameLogic())
    board.resize(300, 300)
    assert board.cell_at(10, 10) == (0, 0)
    assert board.cell_at(150, 150) == (1, 1)
    assert board.cell_at(290, 110) == (1, 2)
    assert board.cell_at(310, 10) is None


def test_cell_at_ignores_letterbox(qapp):
    board = BoardWidget(GameLogic())
    board.resize(400, 300)  # grid is centred, 50px margin each side
    assert board.cell_at(20, 20) is None
    assert board.cell_at(60, 10) == (0, 0)


def test_initial_window(window):
    assert window.status_label.text() == "Next player: X"
    assert window.move_list_widget.sort_button.text() == "Sort moves Descending"
    assert len(window.move_list_widget.move_buttons) == 1


def test_clicks_update_status_and_moves(window):
    window._on_cell_clicked(0, 0)
    window._on_cell_clicked(1, 1)
    assert window.status_label.text() == "Next player: X"
    texts = [b.text() for b in window.move_list_widget.move_buttons]
    assert texts == ["Go to game start", "Go to move #1 (1, 1)", "Go to move #2 (2, 2)"]


def test_winner_shown(window):
    for r, c in [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0)]:
        window._on_cell_clicked(r, c)
    assert window.status_label.text() == "Winner: X"
    window._on_cell_clicked(2, 2)
    assert len(window.game_logic.history) == 6


def test_current_move_is_bold(window):
    window._on_cell_clicked(0, 0)
    window._on_cell_clicked(0, 1)
    click_move(window, 1)
    assert window.game_logic.current_move == 1
    bold = [b.property("move") for b in window.move_list_widget.move_buttons if b.font().bold()]
    assert bold == [1]
    assert window.status_label.text() == "Next player: O"


def test_sort_button_reverses_list(window):
    window._on_cell_clicked(0, 0)
    window.move_list_widget.sort_button.click()
    buttons = window.move_list_widget.move_buttons
    assert [b.property("move") for b in buttons] == [1, 0]
    assert window.move_list_widget.sort_button.text() == "Sort moves Ascending"
    assert len(window.game_logic.history) == 2


def test_new_game_resets(window):
    window._on_cell_clicked(0, 0)
    window.reset_game()
    assert window.status_label.text() == "Next player: X"
    assert len(window.move_list_widget.move_buttons) == 1


def test_move_list_signals(qapp):
    game = GameLogic()
    game.play(4)
    widget = MoveListWidget(game)
    jumps, toggles = [], []
    widget.jump_requested.connect(jumps.append)
    widget.sort_toggled.connect(lambda: toggles.append(True))
    widget.move_buttons[0].click()
    widget.sort_button.click()
    assert jumps == [0]
    assert toggles == [True]
