import unittest
from typing import Any

from intervalmap.structures import ReadonlyDict, SortedLookupDict


class TestSortedLookupDict(unittest.TestCase):
    def setUp(self) -> None:
        self.ld = SortedLookupDict({3.0: 'c', 1: 'a', 4: 'd', 2: 'b'})

    def test_initialization_sorts_keys(self):
        self.assertEqual(list(self.ld.keys()), [1, 2, 3, 4])
        self.assertEqual(list(self.ld.values()), ['a', 'b', 'c', 'd'])

    def test_getitem(self):
        self.assertEqual(self.ld[1], 'a')
        self.assertEqual(self.ld[4], 'd')
        with self.assertRaises(KeyError):
            _ = self.ld[999]

    def test_setitem_keeps_order(self):
        self.ld[2.5] = 'x'
        self.ld[0] = 'z'
        self.assertEqual(list(self.ld), [0, 1, 2, 2.5, 3, 4])
        self.assertEqual(self.ld.floor(2.7), (2.5, 'x'))

    def test_setitem_overwrites(self):
        self.ld[2] = 'B'
        self.assertEqual(len(self.ld), 4)
        self.assertEqual(self.ld[2], 'B')

    def test_delitem(self):
        del self.ld[1]
        self.assertNotIn(1, self.ld)
        self.assertEqual(self.ld.first(), (2, 'b'))
        with self.assertRaises(KeyError):
            del self.ld[999]

    def test_len_and_contains(self):
        self.assertEqual(len(self.ld), 4)
        self.assertIn(2, self.ld)
        self.assertNotIn(999, self.ld)

    def test_floor(self):
        self.assertEqual(self.ld.floor(2.5), (2, 'b'))  # key=2 < 2.5
        self.assertEqual(self.ld.floor(2), (2, 'b'))  # exact match
        self.assertIsNone(self.ld.floor(0.5))  # below all
        self.assertEqual(self.ld.floor(5), (4, 'd'))  # above all → last

    def test_ceiling(self):
        self.assertEqual(self.ld.ceiling(2.5), (3, 'c'))
        self.assertEqual(self.ld.ceiling(3), (3, 'c'))
        self.assertIsNone(self.ld.ceiling(5))
        self.assertEqual(self.ld.ceiling(0.5), (1, 'a'))

    def test_lower(self):
        self.assertEqual(self.ld.lower(2.5), (2, 'b'))
        self.assertEqual(self.ld.lower(2), (1, 'a'))  # strictly less
        self.assertIsNone(self.ld.lower(1))
        self.assertEqual(self.ld.lower(5), (4, 'd'))

    def test_higher(self):
        self.assertEqual(self.ld.higher(2.5), (3, 'c'))
        self.assertEqual(self.ld.higher(2), (3, 'c'))  # strictly greater
        self.assertIsNone(self.ld.higher(4))
        self.assertEqual(self.ld.higher(0.5), (1, 'a'))

    def test_first_and_last(self):
        self.assertEqual(self.ld.first(), (1, 'a'))
        self.assertEqual(self.ld.last(), (4, 'd'))

    def test_range_is_half_open_by_default(self):
        self.assertEqual(list(self.ld.range(2, 4)), [(2, 'b'), (3, 'c')])

    def test_range_inclusive(self):
        self.assertEqual(
            list(self.ld.range(2, 4, inclusive=(False, True))), [(3, 'c'), (4, 'd')]
        )

    def test_range_unbounded(self):
        self.assertEqual([k for k, _ in self.ld.range()], [1, 2, 3, 4])
        self.assertEqual([k for k, _ in self.ld.range(3)], [3, 4])
        self.assertEqual([k for k, _ in self.ld.range(end=2)], [1])

    def test_get(self):
        self.assertEqual(self.ld.get(1), 'a')
        self.assertIsNone(self.ld.get(999))
        self.assertEqual(self.ld.get(999, 'x'), 'x')

    def test_items_view(self):
        self.assertEqual(list(self.ld.items()), [(1, 'a'), (2, 'b'), (3, 'c'), (4, 'd')])

    def test_repr(self):
        expected = "SortedLookupDict({1: 'a', 2: 'b', 3.0: 'c', 4: 'd'})"
        self.assertEqual(repr(self.ld), expected)

    def test_copy_is_independent(self):
        copy = self.ld.copy()
        self.assertIsNot(copy, self.ld)
        self.assertEqual(copy, self.ld)
        copy[5] = 'e'
        self.assertNotIn(5, self.ld)

    def test_eq_with_dict(self):
        self.assertEqual(self.ld, {4: 'd', 3: 'c', 2: 'b', 1: 'a'})
        self.assertNotEqual(self.ld, {1: 'a', 2: 'b', 3: 'c', 5: 'e'})

    def test_eq_with_non_mapping(self):
        self.assertEqual(self.ld.__eq__("not a mapping"), NotImplemented)

    def test_clear(self):
        self.ld.clear()
        self.assertEqual(len(self.ld), 0)
        self.assertIsNone(self.ld.first())

    def test_empty(self):
        empty: SortedLookupDict[int, Any] = SortedLookupDict()
        self.assertEqual(len(empty), 0)
        self.assertFalse(empty)
        self.assertIsNone(empty.floor(1))
        self.assertIsNone(empty.ceiling(1))
        self.assertIsNone(empty.lower(1))
        self.assertIsNone(empty.higher(1))
        self.assertIsNone(empty.first())
        self.assertIsNone(empty.last())
        self.assertEqual(list(empty.range(0, 10)), [])

    def test_with_strings(self):
        ld = SortedLookupDict({'b': 2, 'a': 1, 'd': 4, 'c': 3})
        self.assertEqual(ld.floor('c'), ('c', 3))
        self.assertEqual(ld.ceiling('bb'), ('c', 3))
        self.assertIsNone(ld.lower('a'))
        self.assertIsNone(ld.higher('z'))

    def test_with_tuples(self):
        ld = SortedLookupDict({(1, 2): 'A', (0, 1): 'B', (2, 0): 'C'})
        self.assertEqual(ld.floor((1, 1)), ((0, 1), 'B'))
        self.assertEqual(ld.ceiling((1, 1)), ((1, 2), 'A'))

    def test_with_unhashable_keys(self):
        ld: SortedLookupDict[list[int], str] = SortedLookupDict()
        ld[[2]] = 'b'
        ld[[1, 5]] = 'a'
        ld[[2]] = 'B'
        self.assertEqual(list(ld), [[1, 5], [2]])
        self.assertIn([2], ld)
        self.assertNotIn([3], ld)
        self.assertEqual(ld.floor([1, 9]), ([1, 5], 'a'))
        self.assertEqual(ld.higher([1, 5]), ([2], 'B'))
        self.assertEqual(repr(ld), "SortedLookupDict({[1, 5]: 'a', [2]: 'B'})")
        del ld[[1, 5]]
        self.assertEqual(ld.first(), ([2], 'B'))


class TestReadonlyDict(unittest.TestCase):
    def setUp(self) -> None:
        self.rd = ReadonlyDict({'a': 1, 'b': 2})

    def test_read_access(self):
        self.assertEqual(self.rd['a'], 1)
        self.assertEqual(len(self.rd), 2)
        self.assertEqual(list(self.rd), ['a', 'b'])
        self.assertEqual(self.rd.get('c', 3), 3)

    def test_immutable_setitem(self):
        with self.assertRaises(TypeError) as cm:
            self.rd['c'] = 3  # type: ignore[index]
        self.assertIn("does not support item assignment", str(cm.exception))

    def test_immutable_delitem(self):
        with self.assertRaises(TypeError) as cm:
            del self.rd['a']  # type: ignore[attr-defined]
        self.assertIn("does not support item deletion", str(cm.exception))

    def test_source_is_copied(self):
        source = {'a': 1}
        rd = ReadonlyDict(source)
        source['a'] = 2
        self.assertEqual(rd['a'], 1)

    def test_eq_and_repr(self):
        self.assertEqual(self.rd, {'b': 2, 'a': 1})
        self.assertEqual(repr(self.rd), "ReadonlyDict({'a': 1, 'b': 2})")


if __name__ == '__main__':
    unittest.main()
