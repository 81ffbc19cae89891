import os
import shutil
import logging
from typing import Optional

from fastapi import UploadFile

from relay_gateway.utils.errors import ClientInputError, OperationError

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/upload/"

def check_filename(filename: str):
    """
    Refuse names that would land outside the upload directory.
    Only applied when UPLOAD_RESTRICT_FILENAMES is on.
    """
    if filename in (".", "..") or "/" in filename or "\\" in filename:
        raise ClientInputError(f"Invalid filename: {filename}")

def save_upload(file: Optional[UploadFile], upload_dir: str, restrict_filenames: bool = False):
    """
    Write the uploaded file to <upload_dir>/<filename>, replacing any file of
    the same name. Blocking I/O, so routes call this from a threadpool.
    """
    if file is None:
        raise ClientInputError("No file uploaded: missing form field 'file'")
    filename = file.filename
    if not filename:
        raise ClientInputError("No file uploaded: file part has no filename")
    if restrict_filenames:
        check_filename(filename)

    try:
        os.makedirs(upload_dir, mode=0o755, exist_ok=True)
    except OSError as e:
        raise OperationError(f"Failed to create upload directory: {e}")

    # Joined as-is unless restrict_filenames is set; a leading separator never
    # replaces upload_dir, but ".." segments still resolve upwards
    file_path = os.path.join(upload_dir, filename.lstrip("/\\"))

    try:
        dst = open(file_path, "wb")
    except OSError as e:
        raise OperationError(f"Failed to create file: {e}")

    # A failed copy leaves the partial file behind
    with dst:
        try:
            file.file.seek(0)
            shutil.copyfileobj(file.file, dst)
        except OSError as e:
            logger.warning(f"⚠️ Upload of {filename} stopped midway: {e}")
            raise OperationError(f"Failed to save file: {e}")

    logger.info(f"📁 Stored upload {filename} at {file_path}")
    return {"filename": filename, "path": PUBLIC_PREFIX + filename}
