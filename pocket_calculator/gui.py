# gui.py
# Python 3.x, PyQt5
# 버튼/키보드 -> CalculatorEngine 연결

import sys

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QApplication,
    QWidget,
    QGridLayout,
    QVBoxLayout,
    QPushButton,
    QLineEdit,
    QListWidget,
)

from . import keymap
from .engine import CalculatorEngine
from .state import CalculatorState

BUTTONS = [
    ['AC', '+/-', '%', '÷'],
    ['7',  '8',   '9', '×'],
    ['4',  '5',   '6', '−'],
    ['1',  '2',   '3', '+'],
    ['⌫',  '0',   '.', '='],
]

# 텍스트가 없는 특수 키
_QT_KEYS = {
    Qt.Key_Return: 'Enter',
    Qt.Key_Enter: 'Enter',
    Qt.Key_Backspace: 'Backspace',
    Qt.Key_Escape: 'Escape',
}


class CalculatorWindow(QWidget):
    """PyQt5 UI: 버튼/키 입력 -> 엔진 이벤트, 엔진 변경 알림 -> 화면 갱신"""

    def __init__(self, engine=None) -> None:
        super().__init__()
        self.engine = engine or CalculatorEngine()
        self._build_ui()
        self.engine.subscribe(self.render)
        self.render(self.engine.state)

    def _build_ui(self) -> None:
        self.setWindowTitle('Calculator')
        root = QVBoxLayout()
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)
        self.setLayout(root)

        self.display = QLineEdit()
        self.display.setReadOnly(True)
        self.display.setAlignment(Qt.AlignRight)
        self.display.setFocusPolicy(Qt.NoFocus)
        font = QFont(self.display.font())
        font.setPointSize(28)
        self.display.setFont(font)
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(6)
        root.addLayout(grid)

        for r, row in enumerate(BUTTONS):
            for c, label in enumerate(row):
                btn = QPushButton(label)
                btn.setMinimumHeight(56)
                btn.setCursor(Qt.PointingHandCursor)
                btn.setFocusPolicy(Qt.NoFocus)
                # 라벨은 기본 인자로 묶어 둔다 (루프 변수 늦은 바인딩 방지)
                btn.clicked.connect(lambda checked=False, ch=label: self.on_button(ch))
                grid.addWidget(btn, r, c)

        # 최근 계산 기록 (최대 5개)
        self.history = QListWidget()
        self.history.setFocusPolicy(Qt.NoFocus)
        self.history.setMaximumHeight(120)
        root.addWidget(self.history)

        self.setFocusPolicy(Qt.StrongFocus)
        self.resize(360, 640)

    def on_button(self, label: str) -> None:
        event = keymap.event_for_button(label)
        if event is not None:
            self.engine.handle(event)

    def keyPressEvent(self, event) -> None:
        key = _QT_KEYS.get(event.key(), event.text())
        calc_event = keymap.event_for_key(key)
        if calc_event is None:
            super().keyPressEvent(event)
            return
        self.engine.handle(calc_event)

    def render(self, state: CalculatorState) -> None:
        self.display.setText(state.display)
        self.history.clear()
        self.history.addItems([str(entry) for entry in self.engine.current_history()])


def run_gui() -> int:
    app = QApplication(sys.argv)
    w = CalculatorWindow()
    w.show()
    return app.exec()
