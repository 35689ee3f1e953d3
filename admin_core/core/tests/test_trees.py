"""Tests for tree assembly."""

from types import SimpleNamespace

from django.test import SimpleTestCase

from admin_core.core.trees import build_tree, collect_descendant_ids, compact


class BuildTreeTests(SimpleTestCase):
    """Test build_tree."""

    def test_nests_children_under_parents(self):
        rows = [
            {'id': 1, 'parent_id': 0, 'sort': 0},
            {'id': 2, 'parent_id': 1, 'sort': 0},
            {'id': 3, 'parent_id': 2, 'sort': 0},
        ]

        tree = build_tree(rows)

        self.assertEqual(len(tree), 1)
        self.assertEqual(tree[0]['children'][0]['id'], 2)
        self.assertEqual(tree[0]['children'][0]['children'][0]['id'], 3)

    def test_siblings_ordered_by_sort_then_id(self):
        rows = [
            {'id': 5, 'parent_id': 0, 'sort': 2},
            {'id': 4, 'parent_id': 0, 'sort': 1},
            {'id': 3, 'parent_id': 0, 'sort': 1},
            {'id': 6, 'parent_id': 0, 'sort': None},
        ]

        tree = build_tree(rows)

        self.assertEqual([item['id'] for item in tree], [6, 3, 4, 5])

    def test_leaf_nodes_have_no_children_key(self):
        tree = build_tree([{'id': 1, 'parent_id': 0}])

        self.assertNotIn('children', tree[0])

    def test_custom_node_and_children_key(self):
        rows = [
            SimpleNamespace(id=1, parent_id=0, sort=0, name='root'),
            SimpleNamespace(id=2, parent_id=1, sort=0, name='leaf'),
        ]

        tree = build_tree(rows, node=lambda row: {'name': row.name}, children_key='routes')

        self.assertEqual(tree, [{'name': 'root', 'routes': [{'name': 'leaf'}]}])

    def test_node_returning_none_drops_subtree(self):
        rows = [
            {'id': 1, 'parent_id': 0, 'hidden': True},
            {'id': 2, 'parent_id': 1, 'hidden': False},
            {'id': 3, 'parent_id': 0, 'hidden': False},
        ]

        tree = build_tree(rows, node=lambda row: None if row['hidden'] else dict(row))

        self.assertEqual([item['id'] for item in tree], [3])

    def test_orphans_are_left_out(self):
        rows = [
            {'id': 1, 'parent_id': 0},
            {'id': 2, 'parent_id': 99},
        ]

        self.assertEqual([item['id'] for item in build_tree(rows)], [1])

    def test_cycles_terminate(self):
        rows = [
            {'id': 1, 'parent_id': 0},
            {'id': 2, 'parent_id': 1},
            {'id': 1, 'parent_id': 2},
        ]

        tree = build_tree(rows)

        self.assertEqual(tree[0]['id'], 1)
        self.assertEqual(tree[0]['children'][0]['id'], 2)
        self.assertNotIn('children', tree[0]['children'][0])

    def test_starts_from_given_parent(self):
        rows = [
            {'id': 1, 'parent_id': 0},
            {'id': 2, 'parent_id': 1},
            {'id': 3, 'parent_id': 1},
        ]

        self.assertEqual([item['id'] for item in build_tree(rows, parent_id=1)], [2, 3])

    def test_objects_need_a_node_callable(self):
        with self.assertRaises(TypeError):
            build_tree([SimpleNamespace(id=1, parent_id=0, sort=0)])


class DescendantTests(SimpleTestCase):
    """Test collect_descendant_ids."""

    def test_collects_every_level(self):
        rows = [
            {'id': 1, 'parent_id': 0},
            {'id': 2, 'parent_id': 1},
            {'id': 3, 'parent_id': 2},
            {'id': 4, 'parent_id': 0},
        ]

        self.assertEqual(collect_descendant_ids(rows, 1), {2, 3})
        self.assertEqual(collect_descendant_ids(rows, 4), set())


class CompactTests(SimpleTestCase):

    def test_drops_blank_values_only(self):
        self.assertEqual(
            compact({'a': None, 'b': '', 'c': 0, 'd': False, 'e': 'x'}),
            {'c': 0, 'd': False, 'e': 'x'}
        )
