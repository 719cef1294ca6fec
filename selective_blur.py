from pathlib import Path
from typing import List, Optional

import logging
import sys

from PyQt5.QtWidgets import QApplication

from SB_Libs.EditorLib.blur_editor_window import BlurEditorWindow
from SB_Libs.EditorLib.editor_config import get_config_path, load_editor_config


def main(argv: Optional[List[str]] = None) -> None:
    argv = list(sys.argv if argv is None else argv)

    config_path = get_config_path(Path(__file__).resolve().parent)
    config = load_editor_config(config_path)
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    image_path = Path(argv[1]) if len(argv) > 1 else None

    app = QApplication(argv)
    window = BlurEditorWindow(config=config, image_path=image_path, config_path=config_path)
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
