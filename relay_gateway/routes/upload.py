from typing import Optional
from fastapi import APIRouter, Depends, File, UploadFile
from relay_gateway.config import settings
from relay_gateway.schemas.upload_schema import UploadResponse
from relay_gateway.controllers.upload_controller import save_upload

router = APIRouter(tags=["Upload"])

def get_upload_dir() -> str:
    return settings.UPLOAD_DIR

# Plain def: FastAPI runs it in the threadpool, keeping file I/O off the event loop
@router.post("/upload", response_model=UploadResponse, summary="Store an uploaded file")
def upload(file: Optional[UploadFile] = File(None), upload_dir: str = Depends(get_upload_dir)):
    return save_upload(file, upload_dir, settings.UPLOAD_RESTRICT_FILENAMES)
