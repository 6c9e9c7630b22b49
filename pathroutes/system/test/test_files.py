"""
# Check the implementation of filesystem bound paths.
"""
import os
import types
from .. import files as lib
from .. import filesystem
from ...route import flavor

def tree(test):
	"""
	# Allocate a temporary directory with a small tree.

	#!text
		a/x.txt
		a/b/y.txt
		a/b/z.dat
		top.txt
	"""
	t = test.exits.enter_context(lib.Path.fs_tmpdir())
	(t/'a'/'b').fs_mkdir(parents=True)
	(t/'a'/'x.txt').set_text_content('x')
	(t/'a'/'b'/'y.txt').set_text_content('y')
	(t/'a'/'b'/'z.dat').fs_store(b'z')
	(t/'top.txt').set_text_content('top')
	return t

def names(paths, root):
	return sorted(x.relative_to(root).as_posix() for x in paths)

def test_fs_tmpdir(test):
	with lib.Path.fs_tmpdir() as t:
		test.isinstance(t, lib.Path)
		test/t.is_absolute() == True
		test/t.fs_type() == 'directory'
		(t/'file').fs_store(b'data')
	test/t.fs_exists() == False

def test_content(test):
	t = test.exits.enter_context(lib.Path.fs_tmpdir())
	f = t/'data'

	test/f.fs_store(b'bytes') == f
	test/f.fs_load() == b'bytes'
	f.set_text_content('ütext')
	test/f.get_text_content() == 'ütext'
	test/f.fs_load() == 'ütext'.encode('utf-8')

	with f.fs_open('a') as fh:
		fh.write('+')
	test/f.get_text_content() == 'ütext+'

	test/FileNotFoundError ^ (lambda: (t/'void').fs_load())

def test_queries(test):
	t = tree(test)
	f = t/'top.txt'

	test/f.fs_type() == 'data'
	test/f.fs_exists() == True
	test/f.fs_is_data() == True
	test/f.fs_is_directory() == False
	test/f.fs_is_link() == False
	test/(t/'a').fs_is_directory() == True
	test/(t/'void').fs_type() == 'void'
	test/(t/'void').fs_exists() == False

	st = f.fs_status()
	test/st.size == 3
	test/st.type == 'data'
	test/st.filename == 'top.txt'
	test/st.executable == False
	test/(t/'a').fs_status().type == 'directory'
	test/FileNotFoundError ^ (lambda: (t/'void').fs_status())

def test_fs_mkdir(test):
	t = test.exits.enter_context(lib.Path.fs_tmpdir())
	d = t/'d'

	test/d.fs_mkdir() == d
	test/d.fs_is_directory() == True
	test/FileExistsError ^ (lambda: d.fs_mkdir())
	d.fs_mkdir(exist_ok=True)

	test/FileNotFoundError ^ (lambda: (t/'x'/'y').fs_mkdir())
	(t/'x'/'y').fs_mkdir(parents=True)
	test/(t/'x'/'y').fs_is_directory() == True
	(t/'x'/'y').fs_mkdir(parents=True, exist_ok=True)

	# Data files are not directories.
	(t/'f').fs_touch()
	test/FileExistsError ^ (lambda: (t/'f').fs_mkdir(exist_ok=True))

def test_fs_touch(test):
	t = test.exits.enter_context(lib.Path.fs_tmpdir())
	f = t/'f'

	test/f.fs_touch() == f
	test/f.fs_is_data() == True
	f.fs_touch()
	test/FileExistsError ^ (lambda: f.fs_touch(exist_ok=False))

def test_removal(test):
	t = tree(test)
	f = t/'top.txt'

	f.fs_unlink()
	test/f.fs_exists() == False
	test/FileNotFoundError ^ (lambda: f.fs_unlink())
	f.fs_unlink(missing_ok=True)

	(t/'empty').fs_mkdir()
	(t/'empty').fs_rmdir()
	test/(t/'empty').fs_exists() == False
	test/OSError ^ (lambda: (t/'a').fs_rmdir())

	(t/'a').fs_void()
	test/(t/'a').fs_exists() == False
	(t/'a').fs_void()

def test_rename_replace(test):
	t = tree(test)

	moved = (t/'top.txt').fs_rename(t/'moved.txt')
	test/moved == t/'moved.txt'
	test/moved.get_text_content() == 'top'
	test/(t/'top.txt').fs_exists() == False

	(t/'other.txt').set_text_content('other')
	replaced = (t/'other.txt').fs_replace(str(moved))
	test/replaced == moved
	test/moved.get_text_content() == 'other'

def test_fs_copy(test):
	t = tree(test)

	c = (t/'top.txt').fs_copy(t/'copy.txt')
	test/c == t/'copy.txt'
	test/c.get_text_content() == 'top'

	c = (t/'a').fs_copy(t/'acopy', preserve_metadata=True)
	test/names(c.fs_rglob('*'), c) == ['b', 'b/y.txt', 'b/z.dat', 'x.txt']

	test/OSError ^ (lambda: (t/'a').fs_copy(t/'a'))
	test/OSError ^ (lambda: (t/'a').fs_copy(t/'a'/'b'/'inner'))
	test/(t/'a'/'b'/'inner').fs_exists() == False

def test_fs_iterfiles(test):
	t = tree(test)

	test/names(t.fs_iterfiles(), t) == ['a', 'top.txt']
	test/names(t.fs_iterfiles('directory'), t) == ['a']
	test/names(t.fs_iterfiles('data'), t) == ['top.txt']
	test/list((t/'void').fs_iterfiles()) == []

	dirs, files = (t/'a').fs_list()
	test/names(dirs, t) == ['a/b']
	test/names(files, t) == ['a/x.txt']

def test_fs_walk(test):
	t = tree(test)

	walked = [
		(x.relative_to(t).as_posix(), sorted(d), sorted(f))
		for x, d, f in t.fs_walk()
	]
	test/walked[0] == ('.', ['a'], ['top.txt'])
	test/sorted(walked) == [
		('.', ['a'], ['top.txt']),
		('a', ['b'], ['x.txt']),
		('a/b', [], ['y.txt', 'z.dat']),
	]

	walked = [x.relative_to(t).as_posix() for x, d, f in t.fs_walk(top_down=False)]
	test/walked == ['a/b', 'a', '.']

	# Pruning.
	walked = []
	for x, d, f in t.fs_walk():
		walked.append(x)
		d.clear()
	test/walked == [t]

	test/list((t/'void').fs_walk()) == []

def test_fs_glob(test):
	t = tree(test)

	test/names(t.fs_glob('*.txt'), t) == ['top.txt']
	test/names(t.fs_glob('a/*.txt'), t) == ['a/x.txt']
	test/names(t.fs_glob('*/*/*.dat'), t) == ['a/b/z.dat']
	test/names(t.fs_glob('**/*.txt'), t) == ['a/b/y.txt', 'a/x.txt', 'top.txt']
	test/names(t.fs_glob('a/**/*.txt'), t) == ['a/b/y.txt', 'a/x.txt']
	test/names(t.fs_glob('*.TXT', case_sensitive=False), t) == ['top.txt']
	test/names(t.fs_glob('*.TXT', case_sensitive=True), t) == []

	test/ValueError ^ (lambda: t.fs_glob(''))
	test/ValueError ^ (lambda: t.fs_glob(str(t/'*')))

def test_fs_rglob(test):
	t = tree(test)

	test/names(t.fs_rglob('*.txt'), t) == ['a/b/y.txt', 'a/x.txt', 'top.txt']
	test/names(t.fs_rglob('b/*'), t) == ['a/b/y.txt', 'a/b/z.dat']
	test/names(t.fs_rglob('*.dat'), t) == ['a/b/z.dat']

def test_links(test):
	test.skip(os.name == 'nt')
	t = tree(test)
	link = t/'link'

	test/link.fs_link('a') == link
	test/link.fs_is_link() == True
	test/link.fs_is_directory() == True
	test/link.fs_is_directory(follow_links=False) == False
	test/link.fs_type(follow_links=False) == 'link'
	test/link.fs_readlink() == lib.Path('a')
	test/(link/'x.txt').get_text_content() == 'x'

	broken = t/'broken'
	broken.fs_link(t/'void')
	test/broken.fs_type() == 'void'
	test/broken.fs_type(follow_links=False) == 'link'
	broken.fs_void()
	test/broken.fs_type(follow_links=False) == 'void'

	# Voiding a link does not remove the target.
	link.fs_void()
	test/(t/'a'/'x.txt').fs_exists() == True

def test_resolution(test):
	t = tree(test)
	r = t.fs_resolve()

	test/(t/'a'/'..'/'top.txt').fs_resolve() == r/'top.txt'
	test/(t/'void').fs_resolve() == r/'void'
	test/FileNotFoundError ^ (lambda: (t/'void').fs_resolve(strict=True))

	test/lib.Path('x').absolute() == lib.Path.cwd()/'x'
	test/t.absolute() % t
	test/lib.Path.cwd().is_absolute() == True

def test_expanduser(test):
	home = lib.Path.home()
	test/home.is_absolute() == True
	test/lib.Path('~', 'x').expanduser() == home/'x'
	test/lib.Path('x', '~').expanduser() == lib.Path('x', '~')

def test_foreign_flavor(test):
	foreign = flavor.windows if flavor.host() is flavor.posix else flavor.posix
	p = lib.Path('a', flavor=foreign)

	exc = (test/filesystem.UnsupportedCapability ^ (lambda: p.fs_exists()))
	test/exc.capability == 'flavor'
	test/filesystem.UnsupportedCapability ^ (lambda: p.fs_load())
	test/filesystem.UnsupportedCapability ^ (lambda: p.absolute())

	# Lexical operations remain available.
	test/(p/'b').name == 'b'

def test_injected_filesystem(test):
	limited = filesystem.Filesystem(os=types.SimpleNamespace(name=os.name, path=os.path))

	class Limited(lib.Path):
		__slots__ = ()
		fs = limited

	p = Limited('.')
	test/filesystem.UnsupportedCapability ^ (lambda: list(p.fs_iterfiles()))
	test/filesystem.UnsupportedCapability ^ (lambda: p.fs_readlink())
	test.isinstance(p / 'x', Limited)

def test_concrete_flavors(test):
	test/lib.PosixPath('a').flavor % flavor.posix
	test/lib.WindowsPath('a').flavor % flavor.windows
	test/lib.Path('a').flavor % flavor.host()

if __name__ == '__main__':
	import sys; from ...test import library as libtest
	libtest.execute(sys.modules[__name__])
