"""
Style management for the measurement window
"""

from PySide6.QtWidgets import QMessageBox, QPushButton

# kind -> (background, hover, pressed)
BUTTON_COLORS = {
    'standard': ('#787878', '#8C8C8C', '#646464'),
    'primary': ('#007BFF', '#3399FF', '#0056b3'),
}


def button_style(kind='standard', radius=5, extra=""):
    """Stylesheet for a flat push button of the given colour kind"""
    background, hover, pressed = BUTTON_COLORS[kind]
    return f"""
    QPushButton {{
        background-color: {background};
        color: white;
        border: none;
        border-radius: {radius}px;
        padding: 2px 10px;
        {extra}
    }}
    QPushButton:hover {{ background-color: {hover}; }}
    QPushButton:pressed {{ background-color: {pressed}; }}
    QPushButton:disabled {{ background-color: #505050; color: #909090; }}
"""


# Round "?" button next to the toolbar
HELP_BUTTON_STYLE = button_style(radius=10, extra="font-size: 18px; font-weight: bold; padding: 0px;")

MESSAGE_BOX_STYLE = """
    QMessageBox { background-color: #333333; color: white; }
    QMessageBox QLabel { color: white; }
"""

RESULT_LABEL_STYLE = """
    font-size: 16px;
    font-weight: bold;
    color: white;
    background-color: rgba(0, 123, 255, 60);
    border-radius: 5px;
    padding: 6px 10px;
"""

INSTRUCTION_LABEL_STYLE = "color: #66B2FF; font-size: 14px; font-weight: bold;"


def apply_button_style(button, kind='standard'):
    button.setStyleSheet(button_style(kind))


class StyledMessageBox(QMessageBox):
    """Dark message box; Yes/Ok take the primary colour when requested"""

    def __init__(self, parent, title, text, icon=None, buttons=None,
                 default_button=None, use_primary_buttons=True):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setText(text)
        if icon is not None:
            self.setIcon(icon)
        if buttons is not None:
            self.setStandardButtons(buttons)
        if default_button is not None:
            self.setDefaultButton(default_button)
        self.setStyleSheet(MESSAGE_BOX_STYLE)
        self.use_primary_buttons = use_primary_buttons

    def showEvent(self, event):
        for button in self.findChildren(QPushButton):
            primary = (self.use_primary_buttons and
                       self.standardButton(button) in (QMessageBox.Yes, QMessageBox.Ok))
            apply_button_style(button, 'primary' if primary else 'standard')
        super().showEvent(event)


def create_styled_message_box(parent, title, text, icon=None, buttons=None, default_button=None,
                              use_primary_buttons=True):
    """Create styled QMessageBox with consistent styling"""
    return StyledMessageBox(parent, title, text, icon, buttons, default_button, use_primary_buttons)
