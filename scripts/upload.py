#!/usr/bin/env python3
"""
Upload a local file to the configured S3 bucket.

Usage:
    python scripts/upload.py <file_path> [object_key] [options]

Examples:
    python scripts/upload.py report.pdf
    python scripts/upload.py /path/to/data.csv exports/data.csv --sse-s3
    python scripts/upload.py logo.png public/logo.png --public-read
    python scripts/upload.py backup.tar backups/backup.tar --kms-key-id alias/backups
"""
import argparse
import logging
import mimetypes
import os
import sys

from dotenv import load_dotenv

from s3bucket import Bucket, StorageError
from s3bucket.option import put


logger = logging.getLogger("upload")


def format_size(bytes_size: float) -> str:
    """Format bytes to human-readable size."""
    for unit in ['B', 'KB', 'MB', 'GB']:
        if bytes_size < 1024.0:
            return f"{bytes_size:.2f} {unit}"
        bytes_size /= 1024.0
    return f"{bytes_size:.2f} TB"


def guess_content_type(filename: str) -> str:
    """Get MIME content type based on file extension."""
    content_type, _ = mimetypes.guess_type(filename)
    return content_type or 'application/octet-stream'


def build_options(args: argparse.Namespace, file_size: int):
    """Translate command-line flags into PutObject options."""
    opts = [
        put.content_type(args.content_type or guess_content_type(args.file_path)),
        put.content_length(file_size),
    ]
    if args.kms_key_id:
        opts.append(put.sse_kms_key_id(args.kms_key_id))
    elif args.sse_s3:
        opts.append(put.sse_s3())
    if args.public_read:
        opts.append(put.acl_public_read())
    elif args.private:
        opts.append(put.acl_private())
    return opts


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Upload a file to the configured S3 bucket")
    parser.add_argument("file_path", help="Local file to upload")
    parser.add_argument("object_key", nargs="?", default=None,
                        help="Object key (defaults to the file name)")
    parser.add_argument("--content-type", default=None,
                        help="Content-Type (guessed from the extension by default)")
    sse = parser.add_mutually_exclusive_group()
    sse.add_argument("--sse-s3", action="store_true", help="Encrypt with SSE-S3 (AES256)")
    sse.add_argument("--kms-key-id", default=None, help="Encrypt with SSE-KMS using this key")
    acl = parser.add_mutually_exclusive_group()
    acl.add_argument("--private", action="store_true", help="Set ACL private")
    acl.add_argument("--public-read", action="store_true", help="Set ACL public-read")
    parser.add_argument("--overwrite", action="store_true",
                        help="Replace the object if the key already exists")
    return parser.parse_args(argv)


def main(argv=None, bucket=None) -> int:
    """Main upload function. Returns the process exit code."""
    args = parse_args(argv)

    if not os.path.isfile(args.file_path):
        print(f"❌ Error: File not found: {args.file_path}")
        return 1

    file_size = os.path.getsize(args.file_path)
    object_key = args.object_key or os.path.basename(args.file_path)

    print(f"📁 File: {os.path.basename(args.file_path)}")
    print(f"📏 Size: {format_size(file_size)}")
    print(f"🔑 Object Key: {object_key}")
    print()

    try:
        if bucket is None:
            bucket = Bucket.from_env()
        print(f"✓ Using bucket: {bucket.name}")

        if not args.overwrite and bucket.exists_object(object_key):
            print(f"❌ Error: {object_key} already exists (use --overwrite to replace it)")
            return 1

        with open(args.file_path, "rb") as f:
            result = bucket.put_object(object_key, f, *build_options(args, file_size))

        print()
        print("✅ Upload successful!")
        print(f"   Key: {object_key}")
        print(f"   ETag: {result.get('ETag', '-')}")
        if result.get("VersionId"):
            print(f"   Version: {result['VersionId']}")
        return 0

    except StorageError as e:
        print(f"❌ Storage Error: {e}")
        print("\nTroubleshooting:")
        print("1. Check .env file has correct credentials")
        print("2. Verify STORAGE_BUCKET and STORAGE_PROVIDER")
        return 1
    except KeyboardInterrupt:
        print()
        print("\n⚠️  Upload cancelled by user")
        return 1
    except Exception as e:
        logger.exception(f"Upload of {object_key} failed")
        print(f"❌ Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "info").upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    sys.exit(main())
