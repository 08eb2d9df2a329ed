from PySide6.QtWidgets import QWidget, QVBoxLayout, QPushButton, QScrollArea
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont


class MoveListWidget(QWidget):
    """
    sort toggle + one button per history entry
    """
    jump_requested = Signal(int)   # history index
    sort_toggled = Signal()

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic
        self.move_buttons = []     # in display order

        layout = QVBoxLayout(self)
        self.sort_button = QPushButton()
        self.sort_button.clicked.connect(lambda: self.sort_toggled.emit())
        layout.addWidget(self.sort_button)

        # scrolling column of move buttons
        self._list_host = QWidget()
        self._list_layout = QVBoxLayout(self._list_host)
        self._list_layout.setAlignment(Qt.AlignTop)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._list_host)
        layout.addWidget(scroll, 1)

        self.refresh()

    def refresh(self):
        """
        rebuild buttons from game_logic.move_list()
        """
        # button names the order you switch *to*
        order = "Descending" if self.game_logic.is_ascending else "Ascending"
        self.sort_button.setText(f"Sort moves {order}")

        for btn in self.move_buttons:
            self._list_layout.removeWidget(btn)
            btn.hide()
            btn.deleteLater()
        self.move_buttons = []

        for entry in self.game_logic.move_list():
            btn = QPushButton(entry.description)
            f = QFont(btn.font()); f.setBold(entry.is_current); btn.setFont(f)
            btn.setProperty("move", entry.move)
            btn.clicked.connect(lambda _=False, m=entry.move: self.jump_requested.emit(m))
            self._list_layout.addWidget(btn)
            self.move_buttons.append(btn)
