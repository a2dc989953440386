from flask import Blueprint, send_from_directory

from carads.utils.file_handling import get_upload_path

files_bp = Blueprint('files', __name__)


# Путь зависит от версии шаблонов, поддерживаем оба
@files_bp.route("/images/<path:filename>", methods=["GET"])
@files_bp.route("/uploads/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    return send_from_directory(get_upload_path(), filename)
