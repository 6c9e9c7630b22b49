"""
# Check the `file:` URI codec.
"""
from .. import uri as lib
from ..flavor import posix, windows

def test_quote(test):
	test/lib.quote('a b/c') == 'a%20b/c'
	test/lib.quote('\u00fc') == '%C3%BC'
	test/lib.quote('a-b_c.d~e') == 'a-b_c.d~e'
	test/lib.quote('%') == '%25'

def test_unquote(test):
	test/lib.unquote('a%20b/c') == 'a b/c'
	test/lib.unquote('%C3%BC') == '\u00fc'
	test/lib.unquote('plain') == 'plain'
	test/ValueError ^ (lambda: lib.unquote('%4'))
	test/ValueError ^ (lambda: lib.unquote('%zz'))

def test_surrogate_escapes(test):
	s = b'\xff'.decode('utf-8', 'surrogateescape')
	test/lib.quote(s) == '%FF'
	test/lib.unquote('%FF') == s

def test_encode(test):
	test/lib.encode(posix, '', '/', ('a', 'b c')) == 'file:///a/b%20c'
	test/lib.encode(posix, '', '/', ()) == 'file:///'
	test/lib.encode(windows, 'C:', '\\', ('x',)) == 'file:///C:/x'
	test/lib.encode(windows, '\\\\host\\share', '\\', ('f',)) == 'file://host/share/f'
	test/lib.encode(windows, '\\\\host\\share', '\\', ()) == 'file://host/share/'

def test_decode(test):
	test/lib.decode(posix, 'file:///a/b%20c') == '/a/b c'
	test/lib.decode(posix, 'file:/etc/hosts') == '/etc/hosts'
	test/lib.decode(posix, 'file://localhost/etc') == '/etc'
	test/lib.decode(posix, 'FILE:///a') == '/a'
	test/lib.decode(windows, 'file:///C:/x') == 'C:/x'
	test/lib.decode(windows, 'file://host/share/f') == '//host/share/f'

	# Only a literal colon designates a drive.
	test/lib.decode(windows, 'file:///a%3Ab') == '/a:b'
	test/lib.decode(windows, 'file:///a:b') == 'a:b'

def test_decode_errors(test):
	test/ValueError ^ (lambda: lib.decode(posix, 'http://example.com/a'))
	test/ValueError ^ (lambda: lib.decode(posix, 'file:a'))
	test/ValueError ^ (lambda: lib.decode(posix, 'file:'))

if __name__ == '__main__':
	import sys; from ...test import library as libtest
	libtest.execute(sys.modules[__name__])
