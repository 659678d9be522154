"""
Tests for product submission helpers: slugs, website links and upload validation.
"""
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import SimpleTestCase, override_settings

from products.util_modules.links import extract_domain_name, normalize_url
from products.util_modules.slugs import generate_slug, generate_unique_slug, is_valid_slug
from products.validators import FileValidator

MB = 1024 * 1024


def make_file(name, size, content_type):
    """Build an in-memory upload of the given size."""
    return SimpleUploadedFile(name, b'\0' * size, content_type=content_type)


class SlugTest(SimpleTestCase):

    def test_generate_slug(self):
        self.assertEqual(generate_slug('  My Cool App!  '), 'my-cool-app')
        self.assertEqual(generate_slug('snake_case & more--stuff'), 'snake-case-more-stuff')
        self.assertEqual(generate_slug('---Edge---'), 'edge')

    def test_non_ascii_removed(self):
        self.assertEqual(generate_slug('Café Finder'), 'caf-finder')

    def test_generated_slugs_are_valid(self):
        for text in ('Hello World', 'AI-Powered Notes 2.0', 'under_score'):
            self.assertTrue(is_valid_slug(generate_slug(text)), text)

    def test_unique_slug(self):
        self.assertEqual(generate_unique_slug('app', []), 'app')
        self.assertEqual(generate_unique_slug('app', ['app']), 'app-1')
        self.assertEqual(generate_unique_slug('app', ['app', 'app-1', 'app-2']), 'app-3')

    def test_is_valid_slug(self):
        self.assertTrue(is_valid_slug('product-vibes-2'))
        self.assertFalse(is_valid_slug(''))
        self.assertFalse(is_valid_slug('-leading'))
        self.assertFalse(is_valid_slug('trailing-'))
        self.assertFalse(is_valid_slug('Upper'))
        self.assertFalse(is_valid_slug('with space'))


class LinkTest(SimpleTestCase):

    def test_normalize_url(self):
        self.assertEqual(normalize_url('example.com'), 'https://example.com')
        self.assertEqual(normalize_url('  http://example.com '), 'http://example.com')
        self.assertEqual(normalize_url('https://example.com'), 'https://example.com')
        self.assertEqual(normalize_url(''), '')
        self.assertEqual(normalize_url('   '), '   ')

    def test_extract_domain_name(self):
        self.assertEqual(extract_domain_name('https://www.example.com/pricing'), 'example.com')
        self.assertEqual(extract_domain_name('app.example.io/signup'), 'app.example.io')
        self.assertEqual(extract_domain_name('http://sub.example.org'), 'sub.example.org')


class FileValidatorTest(SimpleTestCase):

    def test_valid_logo(self):
        self.assertEqual(FileValidator.validate_logo(make_file('logo.png', 1024, 'image/png')), (True, None))

    def test_logo_wrong_type(self):
        is_valid, error = FileValidator.validate_logo(make_file('logo.pdf', 10, 'application/pdf'))
        self.assertFalse(is_valid)
        self.assertEqual(error, 'Logo must be a valid image file (JPEG, PNG, WebP, or GIF)')

    def test_logo_too_large(self):
        is_valid, error = FileValidator.validate_logo(make_file('logo.png', 5 * MB + 1, 'image/png'))
        self.assertFalse(is_valid)
        self.assertEqual(error, 'Logo file size must be less than 5 MB')

    def test_avatar_too_large(self):
        is_valid, error = FileValidator.validate_avatar(make_file('me.jpg', 2 * MB + 1, 'image/jpeg'))
        self.assertFalse(is_valid)
        self.assertEqual(error, 'Avatar file size must be less than 2 MB')

    def test_product_media_mixed_types(self):
        files = [
            make_file('shot.webp', 1024, 'image/webp'),
            make_file('demo.mp4', 2048, 'video/mp4'),
        ]
        self.assertEqual(FileValidator.validate_product_media(files), (True, None))

    def test_product_media_too_many_files(self):
        files = [make_file(f'{i}.png', 10, 'image/png') for i in range(6)]
        is_valid, error = FileValidator.validate_product_media(files)
        self.assertFalse(is_valid)
        self.assertEqual(error, 'Maximum 5 files allowed for product media')

    @override_settings(PRODUCT_MEDIA_MAX_FILES=2)
    def test_product_media_limit_from_settings(self):
        files = [make_file(f'{i}.png', 10, 'image/png') for i in range(3)]
        self.assertEqual(
            FileValidator.validate_product_media(files),
            (False, 'Maximum 2 files allowed for product media')
        )

    def test_product_media_bad_type(self):
        files = [make_file('notes.txt', 10, 'text/plain')]
        is_valid, error = FileValidator.validate_product_media(files)
        self.assertFalse(is_valid)
        self.assertEqual(error, 'File "notes.txt" must be a valid image or video file')

    def test_product_media_file_too_large(self):
        files = [make_file('big.gif', 10 * MB + 1, 'image/gif')]
        is_valid, error = FileValidator.validate_product_media(files)
        self.assertFalse(is_valid)
        self.assertEqual(error, 'File "big.gif" must be less than 10 MB')

    def test_format_file_size(self):
        self.assertEqual(FileValidator.format_file_size(0), '0 Bytes')
        self.assertEqual(FileValidator.format_file_size(500), '500 Bytes')
        self.assertEqual(FileValidator.format_file_size(1536), '1.5 KB')
        self.assertEqual(FileValidator.format_file_size(50 * MB), '50 MB')
