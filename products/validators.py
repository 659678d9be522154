"""
Validators for product uploads: logos, avatars and product media.

Files are described by any object with `name`, `size` and `content_type`
attributes, which matches Django's UploadedFile.
"""
from django.conf import settings


class FileValidator:
    """Validator for files attached to product submissions and profiles."""

    MAX_LOGO_SIZE = 5 * 1024 * 1024       # 5MB
    MAX_IMAGE_SIZE = 10 * 1024 * 1024     # 10MB per product media file
    MAX_AVATAR_SIZE = 2 * 1024 * 1024     # 2MB
    MAX_TOTAL_SIZE = 50 * 1024 * 1024     # 50MB for all product media
    MAX_MEDIA_FILES = 5

    ALLOWED_IMAGE_TYPES = [
        'image/jpeg',
        'image/jpg',
        'image/png',
        'image/webp',
        'image/gif',
    ]

    ALLOWED_VIDEO_TYPES = [
        'video/mp4',
        'video/webm',
        'video/mov',
    ]

    SIZE_UNITS = ['Bytes', 'KB', 'MB', 'GB']

    @staticmethod
    def validate_logo(file):
        """
        Validate a product logo.

        Returns:
            Tuple of (is_valid: bool, error_message: str or None)
        """
        if not FileValidator.is_image(file):
            return False, "Logo must be a valid image file (JPEG, PNG, WebP, or GIF)"

        if file.size > FileValidator.MAX_LOGO_SIZE:
            return False, f"Logo file size must be less than {FileValidator.format_file_size(FileValidator.MAX_LOGO_SIZE)}"

        return True, None

    @staticmethod
    def validate_product_media(files):
        """
        Validate the images/videos attached to a product.

        Checks the file count first, then the combined size, then each file's
        type and size in order. The first failure wins.

        Returns:
            Tuple of (is_valid: bool, error_message: str or None)
        """
        max_files = getattr(settings, 'PRODUCT_MEDIA_MAX_FILES', FileValidator.MAX_MEDIA_FILES)
        if len(files) > max_files:
            return False, f"Maximum {max_files} files allowed for product media"

        total_size = sum(file.size for file in files)
        if total_size > FileValidator.MAX_TOTAL_SIZE:
            return False, f"Total file size must be less than {FileValidator.format_file_size(FileValidator.MAX_TOTAL_SIZE)}"

        for file in files:
            if not FileValidator.is_image(file) and not FileValidator.is_video(file):
                return False, f'File "{file.name}" must be a valid image or video file'

            if file.size > FileValidator.MAX_IMAGE_SIZE:
                return False, f'File "{file.name}" must be less than {FileValidator.format_file_size(FileValidator.MAX_IMAGE_SIZE)}'

        return True, None

    @staticmethod
    def validate_avatar(file):
        """
        Validate a profile avatar.

        Returns:
            Tuple of (is_valid: bool, error_message: str or None)
        """
        if not FileValidator.is_image(file):
            return False, "Avatar must be a valid image file (JPEG, PNG, WebP, or GIF)"

        if file.size > FileValidator.MAX_AVATAR_SIZE:
            return False, f"Avatar file size must be less than {FileValidator.format_file_size(FileValidator.MAX_AVATAR_SIZE)}"

        return True, None

    @staticmethod
    def format_file_size(num_bytes):
        """Human readable size, e.g. 1536 -> '1.5 KB', 5242880 -> '5 MB'."""
        if num_bytes == 0:
            return '0 Bytes'

        k = 1024
        i = 0
        while num_bytes >= k ** (i + 1) and i < len(FileValidator.SIZE_UNITS) - 1:
            i += 1
        value = round(num_bytes / (k ** i), 2)
        if value == int(value):
            value = int(value)
        return f"{value} {FileValidator.SIZE_UNITS[i]}"

    @staticmethod
    def is_image(file):
        return getattr(file, 'content_type', None) in FileValidator.ALLOWED_IMAGE_TYPES

    @staticmethod
    def is_video(file):
        return getattr(file, 'content_type', None) in FileValidator.ALLOWED_VIDEO_TYPES
