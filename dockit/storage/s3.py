from __future__ import annotations

from typing import Any, BinaryIO, Optional

import boto3
from boto3.exceptions import Boto3Error
from botocore.exceptions import BotoCoreError, ClientError

from dockit.exceptions import UploadError
from dockit.settings import Settings
from dockit.storage import TransferCallback


class S3Storage:
    def __init__(self, region: Optional[str] = None, client: Any = None, **credentials: str) -> None:
        if client is None:
            # Blank credentials fall through to boto3's default provider chain.
            creds = {name: value for name, value in credentials.items() if value}
            session = boto3.session.Session(region_name=region, **creds) if region else boto3.session.Session(**creds)
            client = session.client("s3")
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "S3Storage":
        return cls(
            region=settings.region,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
        )

    def put_stream(
        self,
        bucket: str,
        key: str,
        stream: BinaryIO,
        *,
        size: int,
        content_type: str,
        callback: Optional[TransferCallback] = None,
    ) -> str:
        try:
            self.client.upload_fileobj(
                stream,
                bucket,
                key,
                ExtraArgs={"ContentType": content_type},
                Callback=callback,
            )
        except (Boto3Error, BotoCoreError, ClientError) as exc:
            raise UploadError(
                f"Upload to s3://{bucket}/{key} failed: {exc}",
                {"bucket": bucket, "key": key, "size": str(size)},
            ) from exc
        return f"s3://{bucket}/{key}"


__all__ = ["S3Storage"]
