# UI.py
""""PySide6 user interface for the Scientific Calculator.

Structure
---------
- Calculator UI: main window with display and button grid
- History UI: dialog listing the latest calculations
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, display, layout and buttons
- Handle user input and maintain undo/redo
- Toggle the angle mode (DEG / RAD) and store it in the settings
- Dispatch the expression to MathEngine in a worker thread
- Render results and show MathEngine errors as dialogs
- Keep the display readable (auto-resizing font, dark/light mode)
- Clipboard integration and optional auto-evaluate after paste


Responsibilities (Settings)
---------------------------

- Load Current Settings and Settings Descriptions via Config_Manager
- Validate user input (e.g. minimum decimal places)
- Save and apply theme changes immediately


Threading Note
--------------
Evaluation is executed off the UI thread in Worker(QObject), so the UI can still handle events like resizing.
Results (or errors) are emitted via a Qt signal and handled back in the UI.
"""

import logging
import math
import sys
import threading
from pathlib import Path

import pyperclip
from PySide6 import QtGui, QtWidgets
from PySide6.QtCore import QObject, Qt, QTimer, Signal
from pynput.keyboard import Controller

from . import config_manager as config_manager
from . import error as E
from . import MathEngine as MathEngine
from .History import MAX_LIMIT
from .ScientificEngine import AngleMode, to_input_text

logger = logging.getLogger(__name__)

# Resolve project root depending on run mode (Script or .exe)
if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent.parent

# The desktop app has a single local user; the history is keyed by this id.
LOCAL_USER = "local"

ENTER = "⏎"
SETTINGS = "⚙"
CLIPBOARD = "\U0001F4CB"  # copy
PASTE = "\U0001F4D1"
HISTORY = "\U0001F552"
UNDO = "↶"
REDO = "↷"
MODE = "mode"  # placeholder key, the button shows DEG / RAD

# Settings that must be at least this value in the settings dialog
MINIMUM_VALUES = {
    "decimal_places": 2,
    "max_nesting_depth": 1,
    "history_limit": 1,
}


def ans_text(value):
    """Last result as display text; negatives are bracketed so they can follow an operator."""
    text = to_input_text(value)
    return f"({text})" if value < 0 else text


def is_shift_pressed():
    """""

    Small and simple check, whether shift is pressed or not.
    Used for the "shift to copy" behaviour of the clipboard button.

    """""

    keyboard_controller = Controller()
    return keyboard_controller.shift_pressed


class Worker(QObject):
    """""

    Runs in a separate thread, hands the problem to MathEngine.calculate
    and emits a Signal with the result (or the error) back to the Calculator UI.

    """""

    job_finished = Signal(object, str)

    def __init__(self, problem, mode):
        super().__init__()
        self.data = problem
        self.mode = mode

    def run_Calc(self):

        try:
            evaluation = MathEngine.calculate(self.data, mode=self.mode, user_id=LOCAL_USER)
            self.job_finished.emit(evaluation, self.data)

        except E.CalculatorError as e:
            # Known, handled error (e.g., "Division by zero")
            self.job_finished.emit(e, self.data)

        except Exception as e:
            # Unexpected crash we didn't plan for (e.g., a bug in the code)
            logger.exception("Worker crashed on %r", self.data)
            critical_error = E.CalculatorError(
                message=f"Unexpected crash: {e}",
                code="9999",
                equation=self.data
            )
            self.job_finished.emit(critical_error, self.data)


def dark_stylesheet(widget_name):
    return f"""
        {widget_name} {{background-color: #121212;}}
        QLabel {{color: white;}}
        QCheckBox {{color: white;}}
        QListWidget {{background-color: #1e1e1e; color: white;}}
        QLineEdit {{background-color: #444444;color: white;border: 1px solid #666666;}}
        QPushButton {{background-color: #666666;color: white;}}"""


class HistoryDialog(QtWidgets.QDialog):
    """""

    Lists the latest calculations of the local user (newest first).
    Double clicking an entry hands its expression back to the calculator.

    """""

    expression_selected = Signal(str)

    def __init__(self, history, limit, parent=None, darkmode=False):
        super().__init__(parent)
        self.history = history

        self.setWindowTitle("History")
        self.resize(320, 400)
        main_layout = QtWidgets.QVBoxLayout(self)

        self.list_widget = QtWidgets.QListWidget()
        self.list_widget.itemDoubleClicked.connect(self.select_entry)
        main_layout.addWidget(self.list_widget)

        button_row = QtWidgets.QHBoxLayout()
        clear_button = QtWidgets.QPushButton("Clear history")
        clear_button.clicked.connect(self.clear_history)
        close_button = QtWidgets.QPushButton("Close")
        close_button.clicked.connect(self.reject)
        button_row.addWidget(clear_button)
        button_row.addWidget(close_button)
        main_layout.addLayout(button_row)

        if darkmode:
            self.setStyleSheet(dark_stylesheet("QDialog"))

        self.load_entries(max(1, min(int(limit), MAX_LIMIT)))

    def load_entries(self, limit):
        self.list_widget.clear()
        try:
            entries = self.history.get_history(LOCAL_USER, limit=limit)
        except E.HistoryError as e:
            QtWidgets.QMessageBox.critical(self, "History error", e.message)
            return

        for entry in entries:
            item = QtWidgets.QListWidgetItem(f"{entry['expression']} = {entry['result']}   [{entry['mode']}]")
            item.setData(Qt.ItemDataRole.UserRole, entry["expression"])
            item.setToolTip(entry["timestamp"])
            self.list_widget.addItem(item)

    def select_entry(self, item):
        self.expression_selected.emit(item.data(Qt.ItemDataRole.UserRole))
        self.accept()

    def clear_history(self):
        try:
            self.history.clear_history(LOCAL_USER)
        except E.HistoryError as e:
            QtWidgets.QMessageBox.critical(self, "History error", e.message)
            return
        self.list_widget.clear()


class SettingsDialog(QtWidgets.QDialog):
    """""

    This class is responsible for managing the settings window, saving the new settings and opening and error
    message if something went wrong.

    All of the editable Settings can be seperated into two categories:
    1. Checkboxes   (Managed with True or False)
    2. Input Fields (Managed as an Integer)

    Text settings (e.g. the history file) are only editable in config.json.

    """""

    settings_saved = Signal()  # Signal to tell the main window to update

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}  # Widgets (Setting options) by setting key

        # --- 1. Window Setup ---
        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(340, 300)

        main_layout = QtWidgets.QVBoxLayout(self)

        # --- 2. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        # --- 3. Build Widgets ---
        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            # --- 3a. Checkbox Builder (for Boolean settings) ---
            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            # --- 3b. Input Field Builder (for Integer settings) ---
            elif isinstance(value, int):
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                minimum = MINIMUM_VALUES.get(key_value)
                label_text = description if minimum is None else f"{description} (min. {minimum}):"
                label = QtWidgets.QLabel(label_text)
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))  # Show current value as placeholder

                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        # --- 4. OK / Cancel Buttons ---
        button_box = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.StandardButton.Ok | QtWidgets.QDialogButtonBox.StandardButton.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(lambda: self.save_settings(self.setting_value_list))
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self, setting_value_list):
        for key_value, widget in self.widgets.items():

            # --- Checkboxes ---
            if isinstance(widget, QtWidgets.QCheckBox):
                setting_value_list[key_value] = widget.isChecked()

            # --- Input Fields (like 'decimal_places') ---
            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()

                # If user left it blank, keep the old value
                if new_value_str == "":
                    continue

                try:
                    new_value_int = int(new_value_str)
                    minimum = MINIMUM_VALUES.get(key_value)
                    if minimum is not None and new_value_int < minimum:
                        raise ValueError(f"'{new_value_int}' is too small. Minimum is {minimum}.")
                except ValueError as e:
                    # Show an error box and STOP the save process
                    logger.info("Invalid settings input for %s: %s", key_value, e)
                    QtWidgets.QMessageBox.critical(self, "Invalid Input:",
                                                   f"Error in input for '{key_value}':\n\n{e}\n\nPlease correct your input.")
                    return

                setting_value_list[key_value] = new_value_int

        saved_settings = config_manager.save_setting(setting_value_list)

        if saved_settings != {}:
            self.settings_saved.emit()
            self.accept()
            self.update_darkmode()
        else:
            QtWidgets.QMessageBox.critical(self, "Error", "Settings could not be saved (error in config_manager).")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"]:
            self.setStyleSheet(dark_stylesheet("QDialog"))
        else:
            self.setStyleSheet("")


class ScientificCalculator(QtWidgets.QWidget):
    # --- Class-level attributes for button hold logic ---
    shift_is_held = False
    initial_delay = 500
    repeat_interval = 100
    was_held = False
    held_button_value = None

    # Buttons that support "press and hold"
    HOLD_BUTTONS = ['0', '1', '2', '3', '4', '5', '6', '7', '8', '9', UNDO, REDO, '<']

    # Characters that can be typed directly on the keyboard
    TYPEABLE = set("0123456789.+-*/^()abcdefghijklmnopqrstuvwxyzEPI ")

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")

        # --- 2. Instance State Variables ---
        self.ans = None  # Last result as a float
        self.thread_active = False
        self.received_result = False  # Was the last text an answer?
        self.first_run = True
        self.undo = ["0"]
        self.redo = []
        self.hold_timer = QTimer(self)
        self.hold_timer.timeout.connect(self.handle_hold_tick)
        self.display_text = "0"
        self.worker_instance = None

        # --- 3. Window Setup ---
        icon_path = PROJECT_ROOT / "icons" / "icon.png"
        if icon_path.exists():
            self.setWindowIcon(QtGui.QIcon(str(icon_path)))
        self.button_objects = {}
        self.setWindowTitle("Scientific Calculator")
        self.resize(480, 640)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )

        # --- 4. Display Setup ---
        self.display = QtWidgets.QLineEdit("0")
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.display.setReadOnly(True)
        font = self.display.font()
        font.setPointSize(36)
        self.display.setFont(font)
        self.display.setSizePolicy(expanding_policy)
        main_v_layout.addWidget(self.display, 1)

        # --- 5. Button Grid Setup ---
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 4)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(0)
        button_grid.setContentsMargins(0, 0, 0, 0)

        for i in range(9):
            button_grid.setRowStretch(i, 1)
        for j in range(6):
            button_grid.setColumnStretch(j, 1)

        # --- 6. Button Definitions ---
        # (text, row, column)
        self.buttons = [
            (SETTINGS, 0, 0), (CLIPBOARD, 0, 1), (HISTORY, 0, 2), (UNDO, 0, 3), (REDO, 0, 4), ('<', 0, 5),
            (MODE, 1, 0), ('sin(', 1, 1), ('cos(', 1, 2), ('tan(', 1, 3), ('(', 1, 4), (')', 1, 5),
            ('PI', 2, 0), ('asin(', 2, 1), ('acos(', 2, 2), ('atan(', 2, 3), ('^', 2, 4), ('/', 2, 5),
            ('E', 3, 0), ('sinh(', 3, 1), ('cosh(', 3, 2), ('tanh(', 3, 3), ('sqrt(', 3, 4), ('*', 3, 5),
            ('log(', 4, 0), ('7', 4, 1), ('8', 4, 2), ('9', 4, 3), ('cbrt(', 4, 4), ('-', 4, 5),
            ('ln(', 5, 0), ('4', 5, 1), ('5', 5, 2), ('6', 5, 3), ('exp(', 5, 4), ('+', 5, 5),
            ('fact(', 6, 0), ('1', 6, 1), ('2', 6, 2), ('3', 6, 3), ('abs(', 6, 4), ('Ans', 6, 5),
            ('floor(', 7, 0), ('ceil(', 7, 1), ('0', 7, 2), ('.', 7, 3), ('round(', 7, 4), ('C', 7, 5),
        ]

        # --- 7. Button Creation Loop ---
        for text, row, col in self.buttons:
            button = QtWidgets.QPushButton(text)
            button.setSizePolicy(expanding_policy)

            if text == SETTINGS:
                button.clicked.connect(self.open_settings)
            elif text == HISTORY:
                button.clicked.connect(self.open_history)
            elif text == MODE:
                button.clicked.connect(self.toggle_angle_mode)
            elif text in self.HOLD_BUTTONS:
                # Use press/release signals for hold logic
                button.pressed.connect(lambda checked=False, val=text: self.handle_button_pressed_hold(val))
                button.released.connect(self.handle_button_released_hold)
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_clicked_hold(val))
            else:
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))

            button_grid.addWidget(button, row, col)
            self.button_objects[text] = button

        # Enter spans the whole last row
        enter_button = QtWidgets.QPushButton(ENTER)
        enter_button.setSizePolicy(expanding_policy)
        enter_button.clicked.connect(lambda checked=False: self.handle_button_press(ENTER))
        button_grid.addWidget(enter_button, 8, 0, 1, 6)
        self.button_objects[ENTER] = enter_button

        self.update_mode_button()
        self.update_button_labels()
        self.update_darkmode()

    # --- Angle mode ---
    def angle_mode(self):
        return AngleMode.DEG if self.setting_value_list["degrees"] else AngleMode.RAD

    def toggle_angle_mode(self):
        self.setting_value_list["degrees"] = not self.setting_value_list["degrees"]
        if config_manager.save_setting(self.setting_value_list) == {}:
            logger.warning("Angle mode could not be saved; using it for this session only")
        self.update_mode_button()

    def update_mode_button(self):
        self.button_objects[MODE].setText(self.angle_mode().value)

    # --- Button Hold Logic ---
    def handle_button_pressed_hold(self, value):
        self.was_held = False
        self.held_button_value = value
        self.hold_timer.setInterval(self.initial_delay)
        self.hold_timer.start()

    def handle_button_released_hold(self):
        self.hold_timer.stop()
        self.held_button_value = None

    def handle_button_clicked_hold(self, value):
        # Prevents firing a click *after* a hold.
        if not self.was_held:
            self.handle_button_press(value)

    def handle_hold_tick(self):
        self.was_held = True
        if self.hold_timer.interval() == self.initial_delay:
            self.hold_timer.setInterval(self.repeat_interval)

        if self.held_button_value:
            self.handle_button_press(self.held_button_value)

    # --- Window/Key Event Handlers ---
    def resizeEvent(self, event):
        super().resizeEvent(event)

        self.setMinimumSize(420, 560)
        for button_instance in self.button_objects.values():
            font = button_instance.font()
            if self.first_run:
                font.setPointSize(12)
            else:
                # Scale with the button height
                font.setPointSize(max(12, int(button_instance.height() / 4)))
            button_instance.setFont(font)
        self.first_run = False

        self.update_font_size_display()

    def update_button_labels(self):
        """Clipboard button shows Copy while Shift is held, Paste otherwise."""
        clipboard_button = self.button_objects.get(CLIPBOARD)
        if clipboard_button:
            clipboard_button.setText(CLIPBOARD if self.shift_is_held else PASTE)

    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = True
            self.update_button_labels()
        elif event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self.handle_button_press(ENTER)
        elif event.key() == Qt.Key.Key_Backspace:
            self.handle_button_press('<')
        elif event.text() and event.text() in self.TYPEABLE:
            self.handle_button_press(event.text())
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = False
            self.update_button_labels()
        super().keyReleaseEvent(event)

    def handle_button_press(self, value):
        if value == ENTER:
            self.start_calculation()
            return

        if value in (CLIPBOARD, PASTE):
            self.handle_clipboard()
            return

        if value == '<':
            if self.received_result:
                self.display_text = "0"
            else:
                self.display_text = self.display_text[:-1]
            if self.display_text == "":
                self.display_text = "0"

        elif value == "C":
            self.display_text = "0"

        elif value == UNDO:
            if len(self.undo) > 1:
                self.redo.append(self.undo.pop())
                self.display_text = self.undo[-1]

        elif value == REDO:
            if self.redo:
                self.undo.append(self.redo.pop())
                self.display_text = self.undo[-1]

        elif value == "Ans":
            if self.ans is None or not math.isfinite(self.ans):
                self.show_error(E.CalculatorError("No Value in ANS", code="4003", equation=self.display_text))
                return
            self.append_text(ans_text(self.ans))

        else:
            self.append_text(value)

        self.received_result = False
        if value not in (UNDO, REDO):
            self.undo.append(self.display_text)
            self.redo.clear()

        self.display.setText(self.display_text)
        self.update_font_size_display()

    def append_text(self, value):
        if self.received_result:
            # An operator continues with the last result, anything else starts over
            if value in ('+', '-', '*', '/', '^') and self.ans is not None and math.isfinite(self.ans):
                self.display_text = ans_text(self.ans)
            else:
                self.display_text = "0"

        if self.display_text == "0" and value not in ('.', '+', '-', '*', '/', '^'):
            self.display_text = ""
        self.display_text += value

    def handle_clipboard(self):
        # Shift held: copy the display, otherwise paste the clipboard
        if self.shift_is_held or is_shift_pressed():
            pyperclip.copy(self.display.text())
            return

        clipboard_text = pyperclip.paste().strip()
        if not clipboard_text:
            return

        if self.display_text == "0" or self.received_result:
            self.display_text = clipboard_text
        else:
            self.display_text += clipboard_text
        self.received_result = False

        self.display.setText(self.display_text)
        self.undo.append(self.display_text)
        self.redo.clear()
        self.update_font_size_display()

        if self.setting_value_list["after_paste_enter"]:
            self.start_calculation()

    def start_calculation(self):
        if self.received_result:
            return

        if self.thread_active:
            logger.info("A calculation is already running")
            self.show_error(E.CalculatorError("Calculation already Running!", code="4002",
                                              equation=self.display_text))
            return

        self.thread_active = True
        self.update_return_button()
        self.display.setText("...")
        QtWidgets.QApplication.processEvents()

        # Keep a reference so the worker (and its signal) outlives this call
        self.worker_instance = Worker(self.display_text, self.angle_mode())
        self.worker_instance.job_finished.connect(self.Calc_result)
        my_thread = threading.Thread(target=self.worker_instance.run_Calc, daemon=True)
        my_thread.start()

    def update_font_size_display(self):
        # --- Dynamic Font Resizing for Display ---
        current_text = self.display.text()
        MAX_FONT_SIZE = 48
        MIN_FONT_SIZE = 10

        font = self.display.font()
        current_size = MAX_FONT_SIZE
        padding = self.display.textMargins().left() + self.display.textMargins().right() + 10
        available_width = self.display.width() - padding

        # Shrink until the text fits
        while current_size > MIN_FONT_SIZE:
            font.setPointSize(current_size)
            if QtGui.QFontMetrics(font).horizontalAdvance(current_text) <= available_width:
                break
            current_size -= 1

        font.setPointSize(current_size)
        self.display.setFont(font)

    def update_return_button(self):
        return_button = self.button_objects.get(ENTER)
        if not return_button:
            return

        # Red "X" while busy, blue when idle
        if self.thread_active:
            return_button.setStyleSheet("background-color: #FF0000; color: white; font-weight: bold;")
            return_button.setText("X")
        else:
            return_button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
            return_button.setText(ENTER)
        return_button.update()

    def update_darkmode(self):
        if self.setting_value_list["darkmode"]:
            button_style = "background-color: #121212; color: white; font-weight: bold;"
            self.setStyleSheet("background-color: #121212;")
            self.display.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
        else:
            button_style = "font-weight: normal;"
            self.setStyleSheet("")
            self.display.setStyleSheet("font-weight: bold;")

        for text, button in self.button_objects.items():
            if text != ENTER:
                button.setStyleSheet(button_style)
        self.update_return_button()

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()

        # Reload settings after dialog closes
        self.setting_value_list = config_manager.load_setting_value("all")
        self.update_mode_button()
        self.update_darkmode()

    def open_history(self):
        history_dialog = HistoryDialog(MathEngine.default_history(), self.setting_value_list["history_limit"],
                                       parent=self, darkmode=self.setting_value_list["darkmode"])
        history_dialog.expression_selected.connect(self.recall_expression)
        history_dialog.exec()

    def recall_expression(self, expression):
        self.display_text = expression
        self.received_result = False
        self.undo.append(self.display_text)
        self.redo.clear()
        self.display.setText(self.display_text)
        self.update_font_size_display()

    def get_message_box_stylesheet(self):
        if self.setting_value_list["darkmode"]:
            return """
                QMessageBox { background-color: #121212; color: white; }
                QLabel { color: white; }
                QPushButton {
                    background-color: #2e2e2e;
                    color: white;
                    border: 1px solid #444444;
                    padding: 5px 15px;
                }
                QPushButton:hover { background-color: #444444; }
            """
        return ""

    def show_error(self, error_obj):
        error_box = QtWidgets.QMessageBox(self)
        error_code = error_obj.code
        error_box.setIcon(QtWidgets.QMessageBox.Icon.Critical)
        error_box.setWindowTitle(E.Error_Dictionary.get(error_code[0], "Calculation error"))
        error_box.setText(f"Error {error_code}: {E.ERROR_MESSAGES.get(error_code, 'Unknown error')}")
        error_box.setInformativeText(f"Details: {error_obj.message}\nEquation: {error_obj.equation}")
        error_box.setStandardButtons(QtWidgets.QMessageBox.StandardButton.Ok)
        error_box.setStyleSheet(self.get_message_box_stylesheet())
        error_box.exec()

    def Calc_result(self, result, equation):
        self.thread_active = False
        self.worker_instance = None
        self.update_return_button()

        if isinstance(result, E.CalculatorError):
            self.show_error(result)
            self.display.setText(equation)
            self.update_font_size_display()
            return

        self.ans = result.result
        self.received_result = True
        approx_sign = "≈" if result.rounded else "="

        if self.setting_value_list["show_equation"]:
            final_display_text = f"{equation} {approx_sign} {result.display}"
        else:
            final_display_text = f"{approx_sign} {result.display}"

        self.display.setText(final_display_text)
        self.display_text = equation

        self.update_font_size_display()


def main():
    app = QtWidgets.QApplication(sys.argv)
    window = ScientificCalculator()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
