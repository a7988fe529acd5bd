from operator import attrgetter
from pathlib import Path
import pytest
from dailynotes.accessors.base import ParseError
from dailynotes.conf import NotesConf
from dailynotes.models import CreateCmd, FileEditCmd, FileReport
from dailynotes.repos import direct
from dailynotes.repos.direct import DirectRepo


def repo():
    return DirectRepo(NotesConf(root_path='/notes'))


def test_todos_single_file(fs):
    fs.create_file('/notes/a.md', contents='- [ ] task one\nsome text - [x] task two\n- [ ] task three\n')
    result = repo().todos()
    assert result.reports == [FileReport('a.md', '/notes/a.md', ('- [ ] task one', '- [ ] task three'))]
    assert result.total == 2
    assert result.skipped == []


def test_todos_nested(fs):
    fs.create_file('/notes/x.md', contents='- [ ] x1')
    fs.create_file('/notes/sub/y.md', contents='- [ ] y1\n- [ ] y2\n- [x] y3')
    result = repo().todos()
    assert result.total == 3
    assert len(result.reports) == 2
    assert {r.path: r.tasks for r in result.reports} == {
        '/notes/x.md': ('- [ ] x1',),
        '/notes/sub/y.md': ('- [ ] y1', '- [ ] y2'),
    }


def test_todos_deeply_nested(fs):
    fs.create_file('/notes/a/b/c/d.md', contents='- [ ] deep')
    fs.create_file('/notes/a/b/e.md', contents='- [ ] shallower\n  - [ ] nested item')
    fs.create_file('/notes/a/f.md', contents='nothing to do')
    result = repo().todos()
    assert result.total == 3
    assert sorted(r.path for r in result.reports) == ['/notes/a/b/c/d.md', '/notes/a/b/e.md']
    assert result.total == sum(len(r.tasks) for r in result.reports)


def test_todos_omits_files_without_open_tasks(fs):
    fs.create_file('/notes/done.md', contents='- [x] finished\n- [x] also finished')
    fs.create_file('/notes/plain.md', contents='Just some thoughts.')
    fs.create_file('/notes/open.md', contents='- [ ] still open')
    result = repo().todos()
    assert [r.name for r in result.reports] == ['open.md']
    assert result.total == 1


def test_todos_ignores_other_files(fs):
    fs.create_file('/notes/a.txt', contents='- [ ] not markdown')
    fs.create_file('/notes/b.markdown', contents='- [ ] wrong extension')
    fs.create_file('/notes/.md', contents='- [ ] no extension at all')
    fs.create_file('/notes/sub/c.MD', contents='- [ ] wrong case')
    result = repo().todos()
    assert result.reports == []
    assert result.total == 0


def test_todos_ignores_symlinks(fs):
    fs.create_file('/elsewhere/real.md', contents='- [ ] outside the notes')
    fs.create_dir('/elsewhere/dir')
    fs.create_file('/elsewhere/dir/inner.md', contents='- [ ] also outside')
    fs.create_dir('/notes')
    fs.create_symlink('/notes/link.md', '/elsewhere/real.md')
    fs.create_symlink('/notes/linkdir', '/elsewhere/dir')
    result = repo().todos()
    assert result.reports == []
    assert result.total == 0


def test_todos_empty_dir(fs):
    fs.create_dir('/notes')
    result = repo().todos()
    assert result.reports == []
    assert result.total == 0


def test_todos_nonexistent_root(fs):
    result = repo().todos()
    assert result.reports == []
    assert result.total == 0


def test_todos_root_is_file(fs):
    fs.create_file('/notes', contents='- [ ] I am not a directory')
    result = repo().todos()
    assert result.reports == []
    assert result.total == 0


def test_todos_other_path(fs):
    fs.create_file('/notes/a.md', contents='- [ ] in root')
    fs.create_file('/notes/sub/b.md', contents='- [ ] in sub')
    fs.cwd = '/notes'
    result = repo().todos('sub')
    assert [r.path for r in result.reports] == ['/notes/sub/b.md']
    assert result.total == 1


def test_todos_skips_undecodable(fs):
    fs.create_file('/notes/binary.md', contents=b'\xff\xfe\x00- [ ] garbage')
    fs.create_file('/notes/good.md', contents='- [ ] readable')
    result = repo().todos()
    assert [r.name for r in result.reports] == ['good.md']
    assert result.total == 1
    assert len(result.skipped) == 1
    assert isinstance(result.skipped[0], ParseError)
    assert result.skipped[0].path == '/notes/binary.md'


class _Listing(list):
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        pass


def _sorted_scandir(mocker, real_scandir, extra=None, unreadable=()):
    def scandir(path):
        if path in unreadable:
            raise PermissionError(13, 'Permission denied', path)
        entries = sorted(real_scandir(path), key=attrgetter('name'))
        return _Listing(entries + (extra or {}).get(path, []))
    return mocker.patch.object(direct.os, 'scandir', side_effect=scandir)


def test_todos_groups_files_after_subdirectories(fs, mocker):
    fs.create_file('/notes/a.md', contents='- [ ] a')
    fs.create_file('/notes/sub/y.md', contents='- [ ] y')
    fs.create_file('/notes/z.md', contents='- [ ] z')
    _sorted_scandir(mocker, direct.os.scandir)
    result = repo().todos()
    assert [r.name for r in result.reports] == ['y.md', 'a.md', 'z.md']
    assert result.total == 3


def test_todos_nested_grouping(fs, mocker):
    fs.create_file('/notes/a.md', contents='- [ ] a')
    fs.create_file('/notes/m/b.md', contents='- [ ] b')
    fs.create_file('/notes/m/n/c.md', contents='- [ ] c')
    fs.create_file('/notes/m/z.md', contents='- [ ] z')
    fs.create_file('/notes/p/d.md', contents='- [ ] d')
    _sorted_scandir(mocker, direct.os.scandir)
    result = repo().todos()
    assert [r.name for r in result.reports] == ['c.md', 'b.md', 'z.md', 'd.md', 'a.md']
    assert result.total == 5


def test_todos_skips_unlistable_directory(fs, mocker):
    fs.create_file('/notes/locked/hidden.md', contents='- [ ] cannot see me')
    fs.create_file('/notes/visible.md', contents='- [ ] can see me')
    _sorted_scandir(mocker, direct.os.scandir, unreadable={'/notes/locked'})
    result = repo().todos()
    assert [r.name for r in result.reports] == ['visible.md']
    assert result.total == 1
    assert result.skipped == []


def test_todos_skips_broken_entry(fs, mocker):
    fs.create_file('/notes/visible.md', contents='- [ ] can see me')
    broken = mocker.Mock()
    broken.name = 'broken.md'
    broken.path = '/notes/broken.md'
    broken.is_symlink.side_effect = PermissionError(13, 'Permission denied', '/notes/broken.md')
    _sorted_scandir(mocker, direct.os.scandir, extra={'/notes': [broken]})
    result = repo().todos()
    assert [r.name for r in result.reports] == ['visible.md']
    assert result.total == 1


def test_todos_does_not_read_other_files(fs):
    fs.create_file('/notes/image.png', contents=b'\xff\xfe\x00- [ ] not text')
    fs.create_file('/notes/a.md', contents='- [ ] one')
    result = repo().todos()
    assert result.total == 1
    assert result.skipped == []


def test_todos_fresh_each_call(fs):
    fs.create_file('/notes/a.md', contents='- [ ] one')
    r = repo()
    assert r.todos().total == 1
    Path('/notes/a.md').write_text('- [ ] one\n- [ ] two')
    assert r.todos().total == 2


def test_note_names(fs):
    fs.create_file('/notes/projects/beta.md')
    fs.create_file('/notes/projects/alpha.md')
    fs.create_file('/notes/projects/gamma.txt')
    fs.create_file('/notes/projects/sub/delta.md')
    assert repo().note_names('/notes/projects') == ['alpha', 'beta']


def test_note_names_nonexistent(fs):
    assert repo().note_names('/notes/projects') == []


def test_change_create(fs):
    fs.create_dir('/notes/new')
    repo().change([CreateCmd('/notes/new/note.md', '# Hello\n')])
    assert Path('/notes/new/note.md').read_text() == '# Hello\n'


def test_change_create_missing_parent(fs):
    fs.create_dir('/notes')
    with pytest.raises(FileNotFoundError):
        repo().change([CreateCmd('/notes/new/note.md', '')])
    assert not Path('/notes/new').exists()


def test_create_empty(fs):
    fs.create_dir('/notes')
    repo().create('/notes/empty.md')
    assert Path('/notes/empty.md').read_text() == ''


def test_change_unsupported(fs):
    with pytest.raises(ValueError):
        repo().change([FileEditCmd('/notes/a.md')])
