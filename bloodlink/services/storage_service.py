import os
import uuid
from pathlib import Path

import boto3
from fastapi import UploadFile

from bloodlink.core.config import settings

PROFILE_IMAGE_FIELD = "profileImage"


def _get_s3_client():
    return boto3.client(
        "s3",
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
        region_name=settings.AWS_REGION,
    )


def _unique_name(file: UploadFile, prefix: str) -> str:
    ext = os.path.splitext(file.filename or "")[1]
    return f"{prefix}-{uuid.uuid4().hex}{ext}"


async def save_profile_image(file: UploadFile) -> str:
    """Persist an uploaded profile image and return the path clients fetch it from."""
    if settings.STORAGE_BACKEND == "s3":
        return await _upload_s3(file, "profile-images")
    return await _upload_local(file)


async def _upload_local(file: UploadFile) -> str:
    base_dir = Path(settings.UPLOAD_DIR)
    base_dir.mkdir(parents=True, exist_ok=True)

    name = _unique_name(file, PROFILE_IMAGE_FIELD)
    path = base_dir / name

    contents = await file.read()
    with path.open("wb") as f:
        f.write(contents)
    await file.close()

    # Served by the /uploads static mount
    return f"/uploads/{name}"


async def _upload_s3(file: UploadFile, folder: str) -> str:
    s3 = _get_s3_client()
    bucket = settings.AWS_S3_BUCKET
    key = f"{folder}/{_unique_name(file, PROFILE_IMAGE_FIELD)}"

    await file.seek(0)
    s3.upload_fileobj(file.file, bucket, key)
    await file.close()

    if settings.AWS_PUBLIC_BASE_URL:
        return f"{settings.AWS_PUBLIC_BASE_URL}/{key}"

    return f"https://{bucket}.s3.{settings.AWS_REGION}.amazonaws.com/{key}"


def discard_profile_image(path: str) -> None:
    """Remove an image saved by ``save_profile_image`` whose owner was never stored."""
    if settings.STORAGE_BACKEND == "s3":
        base = settings.AWS_PUBLIC_BASE_URL
        if base and path.startswith(base):
            key = path[len(base):].lstrip("/")
        else:
            key = path.split(".amazonaws.com/", 1)[-1]
        _get_s3_client().delete_object(Bucket=settings.AWS_S3_BUCKET, Key=key)
        return

    name = path.rsplit("/", 1)[-1]
    (Path(settings.UPLOAD_DIR) / name).unlink(missing_ok=True)
