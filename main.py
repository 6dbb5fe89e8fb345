# Main.py
""""" Entry point for the Scientific Calculator.

   Responsibilities:
   - Detect run mode (script vs PyInstaller.exe)
   - Verify required files exist in development mode
   - Configure logging, load configuration and start the Qt GUI

"""""
import logging
import sys
from pathlib import Path

from Calculator import config_manager as config_manager

logger = logging.getLogger("Calculator")

# Resolve project root depending on run mode (Script or .exe)

if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.

      In production (.exe) the files are embedded by the bundler, so this check is skipped.
    """

    modules_dir = PROJECT_ROOT / "Calculator"

    REQUIRED = [
        modules_dir / "UI.py",
        modules_dir / "MathEngine.py",
        modules_dir / "Tokenizer.py",
        modules_dir / "Parser.py",
        modules_dir / "Evaluator.py",
        modules_dir / "ScientificEngine.py",
        modules_dir / "History.py",
        modules_dir / "config_manager.py",
        PROJECT_ROOT / "config.json",
        PROJECT_ROOT / "ui_strings.json",
    ]

    missing_files = [file_path.name for file_path in REQUIRED if not file_path.exists()]

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def setup_logging(debug=False):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[CALC] [%(levelname)s] %(name)s: %(message)s",
    )


def main():

    """
    Load configuration and start the GUI.
    - Keep this thin: no business logic here.
    """

    all_settings = config_manager.load_setting_value("all")
    logger.debug("Config loaded: %s", all_settings)

    # Imported here so the file check runs before PySide6 is loaded
    from Calculator import UI as UI

    # Delegate control to the UI layer; the UI owns the event loop.
    UI.main()


if __name__ == "__main__":
    is_running_as_exe = getattr(sys, 'frozen', False)
    setup_logging(debug="--debug" in sys.argv)

    if not is_running_as_exe:
        logger.info("Developer Mode: Checking file paths...")
        check_files_exist()
    else:
        logger.info("Production mode (.exe) is starting...")

    main()
