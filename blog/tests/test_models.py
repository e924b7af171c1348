from datetime import timedelta

from django.core.exceptions import ValidationError
from django.test import TestCase
from django.utils import timezone, translation

from blog.models import BlogPost, Image, Tag, slug_for
from .factories import BlogPostFactory, ImageFactory


class BlogPostValidationTests(TestCase):
    def test_title_is_required(self):
        post = BlogPostFactory.build(title="")
        with self.assertRaises(ValidationError) as ctx:
            post.save()
        self.assertIn('title', ctx.exception.message_dict)
        self.assertEqual(BlogPost.objects.count(), 0)

    def test_whitespace_title_is_rejected(self):
        post = BlogPostFactory.build(title="   ")
        with self.assertRaises(ValidationError) as ctx:
            post.save()
        self.assertIn('title', ctx.exception.message_dict)

    def test_title_must_be_unique(self):
        BlogPostFactory(title="Same title")
        duplicate = BlogPostFactory.build(title="Same title")
        with self.assertRaises(ValidationError) as ctx:
            duplicate.save()
        self.assertIn('title', ctx.exception.message_dict)
        self.assertEqual(BlogPost.objects.filter(title="Same title").count(), 1)

    def test_title_is_at_most_72_characters(self):
        BlogPostFactory(title="a" * 72)
        with self.assertRaises(ValidationError) as ctx:
            BlogPostFactory.build(title="b" * 73).save()
        self.assertIn('title', ctx.exception.message_dict)

    def test_body_is_required(self):
        post = BlogPostFactory.build(body="")
        with self.assertRaises(ValidationError) as ctx:
            post.save()
        self.assertIn('body', ctx.exception.message_dict)

    def test_failed_update_does_not_touch_stored_record(self):
        post = BlogPostFactory(title="Original")
        post.title = ""
        with self.assertRaises(ValidationError):
            post.save()
        self.assertEqual(BlogPost.objects.get(pk=post.pk).title, "Original")

    def test_description_required_when_published(self):
        post = BlogPostFactory.build(published_at=timezone.now() - timedelta(weeks=1), description="")
        with self.assertRaises(ValidationError) as ctx:
            post.save()
        self.assertIn('description', ctx.exception.message_dict)

    def test_blank_description_is_rejected_when_published(self):
        post = BlogPostFactory.build(description="   ")
        with self.assertRaises(ValidationError) as ctx:
            post.save()
        self.assertIn('description', ctx.exception.message_dict)

    def test_description_optional_for_drafts(self):
        post = BlogPostFactory(published_at=None, description="")
        self.assertIsNotNone(post.pk)

    def test_title_whose_slug_is_taken_is_rejected(self):
        BlogPostFactory(title="Foo bar")
        for title in ("Foo Bar", "Foo  bar!"):
            with self.assertRaises(ValidationError) as ctx:
                BlogPostFactory.build(title=title).save()
            self.assertIn('title', ctx.exception.message_dict)
        self.assertEqual(BlogPost.objects.filter(slug="foo-bar").count(), 1)

    def test_resaving_keeps_its_own_slug(self):
        post = BlogPostFactory(title="Foo bar")
        post.title = "Foo Bar"
        post.save()
        self.assertEqual(post.slug, "foo-bar")

    def test_title_with_too_long_slug_is_rejected(self):
        # cada "\ufb01" se convierte en "fi" al generar el slug
        post = BlogPostFactory.build(title="\ufb01" * 41)
        with self.assertRaises(ValidationError) as ctx:
            post.save()
        self.assertIn('title', ctx.exception.message_dict)
        self.assertFalse(BlogPost.objects.exists())

    def test_unknown_language_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            BlogPostFactory.build(language='fr').save()
        self.assertIn('language', ctx.exception.message_dict)

    def test_reports_every_failing_field(self):
        post = BlogPost(published_at=timezone.now())
        with self.assertRaises(ValidationError) as ctx:
            post.save()
        self.assertEqual(set(ctx.exception.message_dict), {'title', 'body', 'description'})


class SlugTests(TestCase):
    def test_sets_the_slug_on_save(self):
        post = BlogPostFactory(title="Foo bar")
        self.assertEqual(post.slug, "foo-bar")
        self.assertEqual(BlogPost.objects.get(pk=post.pk).slug, "foo-bar")

    def test_empty_post_has_no_slug(self):
        empty_post = BlogPost()
        with self.assertRaises(ValidationError):
            empty_post.save()
        self.assertIsNone(empty_post.slug)

    def test_normalizes_spacing_and_case(self):
        post = BlogPostFactory(title="  Foo    BAR  ")
        self.assertEqual(post.slug, "foo-bar")

    def test_slug_follows_title_on_later_saves(self):
        post = BlogPostFactory(title="First title")
        post.title = "Second title"
        post.save()
        self.assertEqual(post.slug, "second-title")

    def test_update_fields_with_title_also_writes_slug(self):
        post = BlogPostFactory(title="First title")
        post.title = "Second title"
        post.save(update_fields=['title'])
        self.assertEqual(BlogPost.objects.get(pk=post.pk).slug, "second-title")

    def test_slug_for(self):
        self.assertEqual(slug_for("Foo bar"), "foo-bar")
        self.assertEqual(slug_for(slug_for("Foo bar")), "foo-bar")
        self.assertIsNone(slug_for(""))
        self.assertIsNone(slug_for(None))
        self.assertIsNone(slug_for("!!!"))


class LanguageDefaultTests(TestCase):
    def test_defaults_to_the_active_language(self):
        with translation.override('ro'):
            post = BlogPost(title="Salut", body="Text")
        self.assertEqual(post.language, 'ro')

    def test_falls_back_to_language_code(self):
        with translation.override(None):
            post = BlogPost(title="Hello", body="Text")
        self.assertEqual(post.language, 'en')


class AccessorTests(TestCase):
    def test_is_published(self):
        self.assertTrue(BlogPostFactory.build().is_published)
        self.assertFalse(BlogPostFactory.build(published_at=None).is_published)

    def test_to_param_returns_the_title_as_slug(self):
        post = BlogPostFactory.build(title="A cool title")
        self.assertEqual(post.to_param(), "a-cool-title")

    def test_to_param_without_title(self):
        self.assertIsNone(BlogPost().to_param())

    def test_get_absolute_url(self):
        post = BlogPostFactory(title="A cool title")
        self.assertEqual(post.get_absolute_url(), "/api/blog/posts/a-cool-title/")

    def test_pretty_title(self):
        self.assertEqual(BlogPostFactory.build(title="a cool title").pretty_title, "A Cool Title")
        self.assertEqual(BlogPostFactory.build(title="A COOL title").pretty_title, "A Cool Title")
        self.assertEqual(BlogPost().pretty_title, "")

    def test_str(self):
        self.assertEqual(str(BlogPostFactory.build(title="Hello")), "Hello")


class ImageAssociationTests(TestCase):
    def setUp(self):
        self.post = BlogPostFactory()
        self.image = ImageFactory(blog_post=self.post)

    def test_find_image_by_id(self):
        self.assertEqual(self.post.find_image_by(self.image.pk), self.image)
        self.assertEqual(self.post.find_image_by(str(self.image.pk)), self.image)

    def test_find_image_by_missing_id(self):
        self.assertIsNone(self.post.find_image_by(self.image.pk + 100))

    def test_find_image_by_non_numeric_id(self):
        self.assertIsNone(self.post.find_image_by("abc"))
        self.assertIsNone(self.post.find_image_by(None))

    def test_find_image_by_ignores_other_posts_images(self):
        other_image = ImageFactory()
        self.assertIsNone(self.post.find_image_by(other_image.pk))

    def test_find_image_by_on_unsaved_post(self):
        self.assertIsNone(BlogPost().find_image_by("100"))

    def test_delete_removes_images(self):
        ImageFactory(blog_post=self.post)
        other_image = ImageFactory()
        self.post.delete()
        self.assertFalse(BlogPost.objects.filter(title=self.post.title).exists())
        self.assertEqual(list(Image.objects.all()), [other_image])

    def test_invalid_image_url_is_rejected(self):
        with self.assertRaises(ValidationError):
            ImageFactory(blog_post=self.post, url="not a url")


class AssignImagesTests(TestCase):
    def setUp(self):
        self.post = BlogPostFactory()
        self.kept = ImageFactory(blog_post=self.post, alt="old alt")
        self.removed = ImageFactory(blog_post=self.post)

    def test_creates_updates_and_destroys(self):
        self.post.assign_images([
            {'url': "https://example.com/new.jpg", 'alt': "new", 'position': 2},
            {'id': self.kept.pk, 'alt': "new alt"},
            {'id': self.removed.pk, '_destroy': '1'},
        ])
        self.kept.refresh_from_db()
        self.assertEqual(self.kept.alt, "new alt")
        self.assertFalse(Image.objects.filter(pk=self.removed.pk).exists())
        self.assertEqual(
            sorted(self.post.images.values_list('url', flat=True)),
            sorted([self.kept.url, "https://example.com/new.jpg"]),
        )

    def test_unknown_id_rolls_back_everything(self):
        other_image = ImageFactory()
        with self.assertRaises(Image.DoesNotExist):
            self.post.assign_images([
                {'url': "https://example.com/new.jpg"},
                {'id': other_image.pk, 'alt': "stolen"},
            ])
        self.assertEqual(self.post.images.count(), 2)
        other_image.refresh_from_db()
        self.assertEqual(other_image.alt, "Imagen de ejemplo")


class TagListTests(TestCase):
    def test_set_tag_list_creates_missing_tags(self):
        Tag.objects.create(name="python")
        post = BlogPostFactory()
        post.set_tag_list(["python", " django ", ""])
        self.assertEqual(sorted(post.tags.values_list('name', flat=True)), ["django", "python"])
        self.assertEqual(Tag.objects.count(), 2)

    def test_tag_slug_is_generated(self):
        tag = Tag.objects.create(name="Web Development")
        self.assertEqual(tag.slug, "web-development")
