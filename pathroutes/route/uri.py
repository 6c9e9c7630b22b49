"""
# Conversion between absolute path strings and `file:` URIs.

# Percent-encoding is applied to the UTF-8 encoding of every character outside
# of the unreserved set and the path delimiter. Surrogate escaped characters, as
# produced by the filesystem encoding for undecodable names, encode to their original
# bytes so that decoding reproduces the original string exactly.
"""
from .flavor import Flavor, windows

unreserved_chars = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"
scheme = 'file:'

_pct_encode = '%%%0.2X'.__mod__
_path_safe = frozenset(map(ord, unreserved_chars + '/'))

def quote(string:str, safe=_path_safe, encode=_pct_encode) -> str:
	"""
	# Percent-encode &string for use as the path of a URI.
	"""
	return ''.join(
		chr(x) if x in safe else encode(x)
		for x in string.encode('utf-8', 'surrogateescape')
	)

def unquote(string:str, int=int) -> str:
	"""
	# Substitute percent escapes in &string with the characters they encode.

	# Raises &ValueError when an escape is not followed by two hexadecimal digits.
	"""
	initial, *areas = string.split('%')
	buf = bytearray(initial.encode('utf-8', 'surrogateescape'))

	for area in areas:
		code = area[:2]
		if len(code) != 2:
			raise ValueError("incomplete percent escape in " + repr(string))
		buf.append(int(code, 16)) #! Invalid %-escape
		buf += area[2:].encode('utf-8', 'surrogateescape')

	return buf.decode('utf-8', 'surrogateescape')

def encode(flavor:Flavor, drive:str, root:str, tail) -> str:
	"""
	# Construct the `file:` URI for the given absolute path components.
	"""
	body = quote('/'.join(tail))

	if flavor is windows and drive:
		if drive[:2] == '\\\\':
			# UNC; host becomes the authority.
			host, share = drive[2:].split('\\', 1)
			return scheme + '//' + host + '/' + quote(share) + ('/' if root else '') + body
		return scheme + '///' + drive + ('/' if root else '') + body

	return scheme + '//' + ('/' if root else '') + body

def decode(flavor:Flavor, uri:str) -> str:
	"""
	# Extract the path string designated by the `file:` URI, &uri.
	# The returned string uses forward slashes and is suitable for construction
	# of a path in the given &flavor.
	"""
	if uri[:len(scheme)].lower() != scheme:
		raise ValueError("URI does not use the file scheme: " + repr(uri))

	path = uri[len(scheme):]
	if path[:2] == '//':
		host, slash, path = path[2:].partition('/')
		path = slash + path
		if host and host.lower() != 'localhost':
			# UNC authority.
			path = '//' + host + path

	if flavor is windows and path[:1] == '/' and path[2:3] == ':' and path[1:2].isalpha():
		# "/C:/..." form; an escaped colon is part of a component.
		path = path[1:]

	path = unquote(path)

	if not path or path[:1] not in ('/', '\\') and not (flavor is windows and path[1:2] == ':'):
		raise ValueError("URI is not absolute: " + repr(uri))

	return path
