"""
Qt GUI for LockGen.

One window: level preset, length, character class toggles, the generated
password with a copy button, and a strength bar.
"""

from __future__ import annotations

import sys
from typing import Optional

from PySide6.QtCore import Qt, QTimer, Slot
from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QComboBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from .config import (
    CUSTOM_LEVEL,
    DEFAULT_LEVEL,
    LEVELS,
    CharacterClass,
    GenerationOptions,
    options_for_level,
)
from .generator import try_generate
from .strength import meter_percent

MIN_LENGTH = 4
MAX_LENGTH = 64
CLIPBOARD_CLEAR_MS = 15000
COPY_FEEDBACK_MS = 1200


class GeneratorWidget(QWidget):
    """
    Generator controls + password display.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        # Set while a preset is being written into the controls so the
        # resulting toggle signals do not flip the level to "custom".
        self._applying_level = False

        # Secure clipboard auto-clear
        self._clipboard_value: str | None = None
        self._clipboard_timer = QTimer(self)
        self._clipboard_timer.setSingleShot(True)
        self._clipboard_timer.timeout.connect(self._on_clipboard_timeout)

        self._copy_feedback_timer = QTimer(self)
        self._copy_feedback_timer.setSingleShot(True)
        self._copy_feedback_timer.timeout.connect(
            lambda: self.copy_button.setText("Copy")
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        layout.addWidget(self._build_options_group())
        layout.addWidget(self._build_password_group())

        self._applying_level = True
        try:
            self.level_combo.setCurrentText(DEFAULT_LEVEL)
        finally:
            self._applying_level = False
        self.apply_level(DEFAULT_LEVEL)
        self.regenerate()

    # -- groups --

    def _build_options_group(self) -> QGroupBox:
        group = QGroupBox("Options")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        level_row = QHBoxLayout()
        level_row.addWidget(QLabel("Level"))
        self.level_combo = QComboBox()
        self.level_combo.addItems(list(LEVELS))
        self.level_combo.currentTextChanged.connect(self.on_level_changed)
        level_row.addWidget(self.level_combo, 1)
        layout.addLayout(level_row)

        layout.addWidget(QLabel("Password length (characters)"))
        length_row = QHBoxLayout()
        self.length_slider = QSlider(Qt.Horizontal)
        self.length_slider.setRange(MIN_LENGTH, MAX_LENGTH)
        self.length_value_label = QLabel(str(self.length_slider.value()))
        self.length_value_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.length_slider.valueChanged.connect(self.on_length_changed)
        self.length_slider.sliderReleased.connect(self.regenerate)
        length_row.addWidget(self.length_slider)
        length_row.addWidget(self.length_value_label)
        layout.addLayout(length_row)

        self.lower_check = QCheckBox("Lowercase (a-z)")
        self.upper_check = QCheckBox("Uppercase (A-Z)")
        self.digits_check = QCheckBox("Numbers (0-9)")
        self.symbols_check = QCheckBox("Symbols (!@#...)")
        self.exclude_ambiguous_check = QCheckBox(
            "Exclude ambiguous characters (I, l, 1, O, 0, ...)"
        )
        for check in self._toggles():
            check.toggled.connect(self.on_toggle_changed)
            layout.addWidget(check)

        group.setLayout(layout)
        return group

    def _build_password_group(self) -> QGroupBox:
        group = QGroupBox("Password")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self.password_field = QLineEdit()
        self.password_field.setReadOnly(True)
        pw_font = QFont("Consolas")
        pw_font.setPointSize(14)
        self.password_field.setFont(pw_font)
        self.password_field.setAlignment(Qt.AlignCenter)

        buttons_row = QHBoxLayout()
        buttons_row.addStretch()
        self.generate_button = QPushButton("Generate")
        self.generate_button.setCursor(Qt.PointingHandCursor)
        self.generate_button.clicked.connect(self.regenerate)
        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(self.copy_to_clipboard)
        buttons_row.addWidget(self.generate_button)
        buttons_row.addWidget(self.copy_button)
        buttons_row.addStretch()

        self.strength_bar = QProgressBar()
        self.strength_bar.setRange(0, 100)
        self.strength_bar.setTextVisible(False)
        self.strength_bar.setFixedHeight(10)

        self.strength_label = QLabel("Strength: –")
        self.strength_label.setAlignment(Qt.AlignCenter)

        layout.addWidget(self.password_field)
        layout.addLayout(buttons_row)
        layout.addWidget(self.strength_bar)
        layout.addWidget(self.strength_label)

        group.setLayout(layout)
        return group

    def _toggles(self) -> list[QCheckBox]:
        return [
            self.lower_check,
            self.upper_check,
            self.digits_check,
            self.symbols_check,
            self.exclude_ambiguous_check,
        ]

    # -- state --

    def current_options(self) -> GenerationOptions:
        return GenerationOptions.from_flags(
            self.length_slider.value(),
            lower=self.lower_check.isChecked(),
            upper=self.upper_check.isChecked(),
            digits=self.digits_check.isChecked(),
            symbols=self.symbols_check.isChecked(),
            exclude_ambiguous=self.exclude_ambiguous_check.isChecked(),
        )

    def apply_level(self, level: str) -> None:
        """
        Write a preset into the controls. "custom" keeps the current toggles.
        """
        if level == CUSTOM_LEVEL:
            return

        opts = options_for_level(level)
        checks = (self.lower_check, self.upper_check, self.digits_check, self.symbols_check)
        self._applying_level = True
        try:
            self.length_slider.setValue(opts.length)
            # checks are laid out in CharacterClass order
            for check, cls in zip(checks, CharacterClass):
                check.setChecked(cls in opts.classes)
            self.exclude_ambiguous_check.setChecked(opts.exclude_ambiguous)
        finally:
            self._applying_level = False

    # -- actions --

    @Slot(str)
    def on_level_changed(self, level: str) -> None:
        if self._applying_level:
            return
        self.apply_level(level)
        self.regenerate()

    @Slot(int)
    def on_length_changed(self, value: int) -> None:
        self.length_value_label.setText(str(value))
        if not self._applying_level and not self.length_slider.isSliderDown():
            self.regenerate()

    @Slot(bool)
    def on_toggle_changed(self, _checked: bool = False) -> None:
        if self._applying_level:
            return
        if self.level_combo.currentText() != CUSTOM_LEVEL:
            # Switching the combo must not re-apply a preset.
            self._applying_level = True
            try:
                self.level_combo.setCurrentText(CUSTOM_LEVEL)
            finally:
                self._applying_level = False
        self.regenerate()

    @Slot()
    def regenerate(self) -> None:
        outcome = try_generate(self.current_options())
        if not outcome.ok:
            # Show the reason where the password would be.
            self.password_field.setText(str(outcome.error) or "Error")
            self.strength_bar.setValue(0)
            self.strength_label.setText("Strength: –")
            self.copy_button.setEnabled(False)
            return

        result = outcome.result
        self.password_field.setText(result.password)
        self.strength_bar.setValue(meter_percent(result.entropy_bits))
        self.strength_label.setText(
            f"Strength: {result.label.text} • ~{result.entropy_bits} bits"
        )
        self.copy_button.setEnabled(True)

    def _on_clipboard_timeout(self) -> None:
        """
        Clear clipboard if it still holds the password we placed.
        """
        if self._clipboard_value is None:
            return

        cb = QGuiApplication.clipboard()
        if cb.text() == self._clipboard_value:
            cb.clear()
        self._clipboard_value = None

    @Slot()
    def copy_to_clipboard(self) -> None:
        password = self.password_field.text()
        if not password:
            return

        QGuiApplication.clipboard().setText(password)
        self._clipboard_value = password
        self._clipboard_timer.start(CLIPBOARD_CLEAR_MS)

        self.copy_button.setText("Copied!")
        self._copy_feedback_timer.start(COPY_FEEDBACK_MS)


class LockGenWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()

        self.setWindowTitle("LockGen")
        self.setMinimumSize(480, 520)

        self._apply_base_style()

        self.generator = GeneratorWidget()
        self.setCentralWidget(self.generator)

    def _apply_base_style(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #05070c;
            }
            QWidget {
                color: #e5e7eb;
                background-color: #05070c;
                font-family: Segoe UI, Arial, sans-serif;
            }
            QGroupBox {
                border: 1px solid #1f2933;
                border-radius: 10px;
                margin-top: 16px;
                background-color: #080b12;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                subcontrol-position: top left;
                padding: 2px 8px;
                color: #7dd3fc;
                font-weight: 600;
            }
            QLineEdit {
                border: 1px solid #1f2933;
                border-radius: 6px;
                padding: 6px 8px;
                background-color: #050810;
            }
            QPushButton {
                border-radius: 8px;
                padding: 6px 14px;
                background-color: #0b1120;
                border: 1px solid #38bdf8;
            }
            QProgressBar {
                border: none;
                border-radius: 5px;
                background-color: #1f2933;
            }
            QProgressBar::chunk {
                border-radius: 5px;
                background-color: qlineargradient(x1:0, y1:0, x2:1, y2:0,
                    stop:0 #ef4444, stop:0.33 #f59e0b, stop:0.66 #22c55e, stop:1 #06b6d4);
            }
            """
        )


def main() -> None:
    app = QApplication(sys.argv)
    window = LockGenWindow()
    window.show()
    sys.exit(app.exec())
