from unittest import TestCase

from inistore.ini.model import IniClass, IniSection


class TestIniSection(TestCase):
    def test_mapping(self):
        sect = IniSection('S', {'b': '2', 'a': '1'})
        assert sect.name == 'S'
        assert list(sect) == ['b', 'a']
        assert str(sect) == '[S]'
        del sect['b']
        assert sect.to_dict() == {'a': '1'}

    def test_rejects_non_str(self):
        sect = IniSection('S')
        with self.assertRaises(TypeError):
            sect['n'] = 42

    def test_copies_pairs(self):
        pairs = {'a': '1'}
        sect = IniSection('S', pairs)
        pairs['a'] = '2'
        assert sect['a'] == '1'


class TestIniClass(TestCase):
    def setUp(self):
        self.doc = IniClass()
        self.doc['A'] = {'x': '1'}
        self.doc['B'] = {'y': '2'}
        self.doc['C'] = {}

    def test_header_lazy(self):
        assert '' not in self.doc
        self.doc.header['k'] = 'v'
        assert self.doc['']['k'] == 'v'

    def test_iter_sections_header_first(self):
        self.doc.header['k'] = 'v'
        names = [s.name for s in self.doc.iter_sections()]
        assert names == ['', 'A', 'B', 'C']
        assert list(self.doc) == ['A', 'B', 'C', '']

    def test_setitem_wraps(self):
        assert isinstance(self.doc['A'], IniSection)
        assert self.doc['A'].name == 'A'

    def test_setdefault(self):
        assert self.doc.setdefault('A') is self.doc['A']
        new = self.doc.setdefault('D', {'z': '3'})
        assert new.to_dict() == {'z': '3'}

    def test_rename(self):
        assert self.doc.rename('B', 'Bee')
        assert list(self.doc) == ['A', 'Bee', 'C']
        assert self.doc['Bee'].name == 'Bee'
        assert self.doc['Bee']['y'] == '2'

    def test_rename_refused(self):
        assert not self.doc.rename('Nope', 'D')
        with self.assertWarns(UserWarning):
            assert not self.doc.rename('A', 'B')
        assert self.doc['A']['x'] == '1'

    def test_update(self):
        other = IniClass()
        other['A'] = {'x': '9', 'w': '0'}
        other['D'] = {'z': '3'}
        self.doc.update(other)
        assert self.doc.to_dict() == {
            'A': {'x': '9', 'w': '0'},
            'B': {'y': '2'},
            'C': {},
            'D': {'z': '3'},
        }

    def test_clear(self):
        self.doc.clear()
        assert len(self.doc) == 0
