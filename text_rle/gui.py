"""
Main file that controls GUI
"""
import os
import sys
from typing import Optional

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from text_rle.config import CodecCfg
from text_rle.errors import MalformedInput
from text_rle.log import init_logger
from text_rle.RLE import RLECompressor

BUTTON_STYLE = """
    font-size: 15px;
    color: white;
    font-weight: 500;
    background-color: {color};
    border-radius: 10px;
    """

TEXT_STYLE = """
    background-color: white;
    font-size: 15px;
    color: black;
    border-radius: 10px;
    """


class MainWindow(QMainWindow):
    """
    class controls main window
    """

    def __init__(self, config: Optional[CodecCfg] = None):
        super().__init__()
        self.config = config or CodecCfg()
        self.logger = init_logger(debug=self.config.debug)
        self.compressor = RLECompressor(self.config)

        self.setFixedSize(QSize(800, 750))
        self.setWindowTitle("Text RLE Compressor")

        self.central_widget = QWidget()
        self.layout = QVBoxLayout()
        self.layout.setContentsMargins(40, 30, 40, 30)
        self.central_widget.setStyleSheet(
            """
            background-color: #E8EEF2;
            """
        )

        self.name = QLabel("Text compressor")
        self.name.setAlignment(Qt.AlignmentFlag.AlignLeft)
        self.name.setStyleSheet(
            """
            font-size: 35px;
            color: #0E103D;
            font-weight: 700;
        """
        )
        self.layout.addWidget(self.name)

        self.input_box = QPlainTextEdit()
        self.input_box.setPlaceholderText("Type text or encoded text here")
        self.input_box.setStyleSheet(TEXT_STYLE)
        self.layout.addWidget(self.input_box)

        self.compress_button = self._button("Compress", "#0E103D", self.compress_text)
        self.decompress_button = self._button("Decompress", "#3590F3", self.decompress_text)
        text_buttons = QHBoxLayout()
        text_buttons.addStretch()
        text_buttons.addWidget(self.compress_button)
        text_buttons.addWidget(self.decompress_button)
        text_buttons.addStretch()
        self.layout.addLayout(text_buttons)

        self.output_box = QPlainTextEdit()
        self.output_box.setReadOnly(True)
        self.output_box.setStyleSheet(TEXT_STYLE)
        self.layout.addWidget(self.output_box)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet(
            """
            font-size: 15px;
            color: black;
            font-weight: 500;
            """
        )
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.status_label)

        self.selected_file = None
        self.file_label = QLabel("No file selected")
        self.file_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.file_label)

        self.pick_button = self._button("Pick a file", "#0E103D", self.pick_file)
        self.compress_file_button = self._button("Compress file", "#0E103D", self.compress_file)
        self.decompress_file_button = self._button(
            "Decompress file", "#3590F3", self.decompress_file
        )
        file_buttons = QHBoxLayout()
        file_buttons.addStretch()
        file_buttons.addWidget(self.pick_button)
        file_buttons.addWidget(self.compress_file_button)
        file_buttons.addWidget(self.decompress_file_button)
        file_buttons.addStretch()
        self.layout.addLayout(file_buttons)

        self.central_widget.setLayout(self.layout)
        self.setCentralWidget(self.central_widget)

    def _button(self, text, color, handler):
        button = QPushButton(text)
        button.setStyleSheet(BUTTON_STYLE.format(color=color))
        button.setFixedSize(QSize(200, 60))
        button.clicked.connect(handler)
        return button

    def compress_text(self):
        """
        function handles text compression
        """
        result, log_info = self.compressor.compress_text(self.input_box.toPlainText())
        self._show_result(result, log_info)

    def decompress_text(self):
        """
        function handles text decompression
        """
        try:
            result, log_info = self.compressor.decompress_text(self.input_box.toPlainText())
        except MalformedInput as e:
            self.logger.info("Rejected input: %s", e)
            QMessageBox.warning(self, "Malformed input", str(e))
            return
        self._show_result(result, log_info)

    def _show_result(self, result, log_info):
        self.output_box.setPlainText(result)
        self.status_label.setText(log_info)
        self.logger.info(log_info)

    def pick_file(self):
        """
        function handles picking files
        """
        dialog = QFileDialog()
        dialog.setFileMode(QFileDialog.FileMode.ExistingFile)
        dialog.setNameFilter("Text files (*.txt)")
        if dialog.exec():
            self.selected_file = dialog.selectedFiles()[0]
            self.file_label.setText(f"Selected: {os.path.basename(self.selected_file)}")

    def compress_file(self):
        """
        function handles file compression
        """
        if not self.selected_file:
            QMessageBox.warning(self, "Error", "No file to compress, select it first")
            return
        try:
            log_info = self.compressor.compress_file(self.selected_file)
        except (OSError, UnicodeDecodeError) as e:
            QMessageBox.warning(self, "Error", str(e))
            return

        self.status_label.setText(
            f"Original size was: {round(os.stat(self.selected_file).st_size / 1024, 2)} KB, "
            f"now size is: {round(os.stat(self.config.compressed_path).st_size / 1024, 2)} KB"
        )
        self.logger.info(log_info)
        QMessageBox.information(self, "Success", "File was compressed using RLE!")

    def decompress_file(self):
        """
        function handles file decompression
        """
        if not self.selected_file:
            QMessageBox.warning(self, "Error", "No file to decompress, select it first")
            return
        try:
            log_info = self.compressor.decompress_file(self.selected_file)
        except (MalformedInput, OSError, UnicodeDecodeError) as e:
            QMessageBox.warning(self, "Error", str(e))
            return

        self.logger.info(log_info)
        QMessageBox.information(
            self, "Success", f"File was decompressed to {self.config.decompressed_path}!"
        )


def main():
    config = CodecCfg.load(sys.argv[1]) if len(sys.argv) > 1 else CodecCfg()
    app = QApplication(sys.argv)
    window = MainWindow(config)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
