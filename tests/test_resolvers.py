from unittest import TestCase

from potion_client.exceptions import InvalidRelationError
from potion_client.resolvers import RelationContext, resolve_path


class ResolvePathTestCase(TestCase):

    def test_collection(self):
        self.assertEqual('http://localhost/posts', resolve_path('http://localhost', 'posts'))

    def test_item(self):
        self.assertEqual('http://localhost/posts/1', resolve_path('http://localhost', 'posts', 1))
        self.assertEqual('http://localhost/posts/0', resolve_path('http://localhost', 'posts', 0))
        self.assertEqual('http://localhost/posts/abc', resolve_path('http://localhost', 'posts', 'abc'))

    def test_trailing_slash(self):
        self.assertEqual('http://localhost/api/posts', resolve_path('http://localhost/api/', 'posts'))

    def test_nested(self):
        context = RelationContext([('users', 1), ('posts', 2)])

        self.assertEqual('http://localhost/users/1/posts/2/comments',
                         resolve_path('http://localhost', 'comments', context=context))
        self.assertEqual('http://localhost/users/1/posts/2/comments/3',
                         resolve_path('http://localhost', 'comments', 3, context=context))

    def test_context_as_pairs(self):
        self.assertEqual('http://localhost/posts/1/comments',
                         resolve_path('http://localhost', 'comments', context=[('posts', 1)]))

    def test_parent_without_id(self):
        with self.assertRaises(InvalidRelationError):
            resolve_path('http://localhost', 'comments', context=[('posts', None)])

    def test_custom(self):
        self.assertEqual('postz', resolve_path('http://localhost', 'posts', custom='postz'))
        self.assertEqual('postz/1', resolve_path('http://localhost', 'posts', 1, custom='postz'))

    def test_custom_nested(self):
        self.assertEqual('http://localhost/posts/1/top',
                         resolve_path('http://localhost', 'comments', context=[('posts', 1)], custom='top'))


class RelationContextTestCase(TestCase):

    def test_extend(self):
        context = RelationContext()
        nested = context.extend('posts', 1).extend('comments', 2)

        self.assertEqual((), context)
        self.assertEqual((('posts', 1), ('comments', 2)), nested)
        self.assertIsInstance(nested, RelationContext)
        self.assertEqual(['/posts/1', '/comments/2'], list(nested.segments()))

    def test_extend_without_id(self):
        with self.assertRaises(InvalidRelationError):
            RelationContext().extend('posts', None)

        with self.assertRaises(InvalidRelationError):
            RelationContext().extend('posts', '')
