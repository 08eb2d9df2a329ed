import logging

from ..game_logic import GameLogic
from ..ui.board_widget import BoardWidget
from ..ui.move_list_widget import MoveListWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

STATUS_STYLES = {
    "winner": "color: lime; font-weight: bold;",
    "draw": "color: #ffd27a; font-weight: bold;",
    "next": "color: #8acaff; font-weight: bold;",
}


class TicTacToeWindow(QMainWindow):
    """
    main window: board on the left, history on the right
    """
    def __init__(self):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_logic = GameLogic()
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        self.move_list_widget = MoveListWidget(self.game_logic, parent=self)

        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.resize(640, 420)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QHBoxLayout(self.central_widget)

        self._create_menu_bar()

        # left column: status + board
        board_column = QVBoxLayout()
        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.status_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        board_column.addWidget(self.status_label)
        board_column.addWidget(self.board_widget, 1)
        self.main_layout.addLayout(board_column, 3)
        self.main_layout.addWidget(self.move_list_widget, 2)

        self.board_widget.cell_clicked.connect(self._on_cell_clicked)
        self.move_list_widget.jump_requested.connect(self._on_jump_requested)
        self.move_list_widget.sort_toggled.connect(self._on_sort_toggled)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.setShortcut("Ctrl+N")
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def refresh(self):
        """
        re-derive every view from game_logic
        """
        status = self.game_logic.status()
        self.status_label.setStyleSheet(STATUS_STYLES[status.kind])
        self.status_label.setText(self.game_logic.status_text())
        self.board_widget.update()
        self.move_list_widget.refresh()

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        res = self.game_logic.make_move(r, c)
        if res == "invalid":
            return  # nothing changed
        if res == "win":
            logger.info("game won: %s", self.game_logic.status_text())
        elif res == "draw":
            logger.info("game drawn")
        self.refresh()

    @Slot(int)
    def _on_jump_requested(self, move):
        if self.game_logic.jump_to(move):
            self.refresh()

    @Slot()
    def _on_sort_toggled(self):
        self.game_logic.toggle_sort()
        self.refresh()

    @Slot()
    def reset_game(self):
        self.game_logic.reset_game()
        self.refresh()
