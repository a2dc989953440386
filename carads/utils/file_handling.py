import os
import uuid
from flask import current_app
from werkzeug.utils import secure_filename


def get_upload_path():
    # Абсолютный UPLOAD_FOLDER используется как есть
    upload_path = os.path.join(
        current_app.root_path,
        current_app.config['UPLOAD_FOLDER']
    )

    os.makedirs(upload_path, exist_ok=True)
    return upload_path


def generate_unique_filename(original_filename):
    """uuid + исходное имя файла"""
    return f"{uuid.uuid4()}_{secure_filename(original_filename)}"


def is_empty_file(file):
    """Поле без файла или файл без содержимого"""
    if not file or file.filename == '':
        return True

    stream = file.stream
    position = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(position)
    return size == 0
