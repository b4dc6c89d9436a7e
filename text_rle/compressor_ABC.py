from abc import ABC, abstractmethod
import io
from typing import Optional, TextIO, Tuple

from text_rle.config import CodecCfg


class Compressor(ABC):
    """
    Інтерфейс, що описує операції стиснення та розпакування тексту
    з використанням різних алгоритмів.
    """

    def __init__(self, config: Optional[CodecCfg] = None):
        self.config = config or CodecCfg()

    @abstractmethod
    def compress(self, input_stream: TextIO, output_stream: TextIO) -> str:
        """
        Читає текст з вхідного потоку, стискає його та записує
        стиснений текст у вказаний вихідний потік.

        Args:
            input_stream: Вхідний потік для тексту
            output_stream: Вихідний потік для запису стисненого тексту

        Returns:
            Рядок з інформацією для логування
        """

    @abstractmethod
    def decompress(self, input_stream: TextIO, output_stream: TextIO) -> str:
        """
        Читає стиснений текст з потоку, розпаковує його та записує
        результат у вказаний вихідний потік.

        Args:
            input_stream: Вхідний потік для стисненого тексту
            output_stream: Вихідний потік для запису розпакованого тексту

        Returns:
            Рядок з інформацією для логування
        """

    def compress_file(self, input_file: str, output_file: Optional[str] = None) -> str:
        """
        Стискає файл. Якщо output_file не вказано, використовується
        шлях з конфігурації.
        """
        output_file = output_file or self.config.compressed_path
        return self._run_file(self.compress, input_file, output_file)

    def decompress_file(
        self, input_file: Optional[str] = None, output_file: Optional[str] = None
    ) -> str:
        """
        Розпаковує файл. За замовчуванням читає результат compress_file
        і пише у decompressed_path з конфігурації.
        """
        input_file = input_file or self.config.compressed_path
        output_file = output_file or self.config.decompressed_path
        return self._run_file(self.decompress, input_file, output_file)

    def compress_text(self, data: str) -> Tuple[str, str]:
        """
        Допоміжний метод для стиснення рядка.

        Returns:
            Кортеж (стиснений текст, інформація про стиснення)
        """
        return self._run_text(self.compress, data)

    def decompress_text(self, data: str) -> Tuple[str, str]:
        """
        Допоміжний метод для розпакування рядка.

        Returns:
            Кортеж (розпакований текст, інформація про розпакування)
        """
        return self._run_text(self.decompress, data)

    def _run_file(self, operation, input_file: str, output_file: str) -> str:
        # Output file is opened only after the operation succeeds
        with open(input_file, "r", encoding=self.config.encoding, newline="") as in_file:
            in_buffer = io.StringIO(in_file.read(), newline="")
        out_buffer = io.StringIO(newline="")
        log_info = operation(in_buffer, out_buffer)
        with open(output_file, "w", encoding=self.config.encoding, newline="") as out_file:
            out_file.write(out_buffer.getvalue())
        return log_info

    @staticmethod
    def _run_text(operation, data: str) -> Tuple[str, str]:
        in_buffer = io.StringIO(data, newline="")
        out_buffer = io.StringIO(newline="")
        log_info = operation(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info
