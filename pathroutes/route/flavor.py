"""
# Path syntax dialects.

# A &Flavor decomposes raw path strings into the triple `(drive, root, tail)` and
# provides the separator, case folding, and joining rules of a dialect. Two flavors
# are defined: &posix and &windows. Neither performs I/O; &windows is usable on any host.

# [ Elements ]
# /posix/
	# The POSIX flavor. Single separator, no drives, case sensitive.
# /windows/
	# The drive and UNC flavor. Accepts `/` as an alternate separator,
	# compares case insensitively.
"""
import os
import re
from collections.abc import Sequence
from typing import Optional

from ..context.tools import cachedcalls

# (drive, root, tail)
Parsed = tuple[str, str, tuple[str, ...]]
empty: Parsed = ('', '', ())

class Flavor(object):
	"""
	# Separator, drive, and case rules of a path dialect.

	# [ Properties ]
	# /identifier/
		# The name of the flavor; `'posix'` or `'windows'`.
	# /separator/
		# The primary separator used when rendering paths.
	# /alternate/
		# The alternate separator accepted on input and rewritten to &separator.
		# &None when the dialect has no alternate.
	# /case_sensitive/
		# Whether components are compared exactly.
	"""
	__slots__ = ('identifier', 'separator', 'alternate', 'case_sensitive',)

	def __init__(self, identifier:str, separator:str, alternate:Optional[str], case_sensitive:bool):
		self.identifier = identifier
		self.separator = separator
		self.alternate = alternate
		self.case_sensitive = case_sensitive

	def __repr__(self):
		return "%s.%s" %(__name__, self.identifier)

	def __reduce__(self):
		return (select, (self.identifier,))

	def normalize(self, string:str) -> str:
		"""
		# Rewrite alternate separators in &string to the primary separator.
		"""
		if self.alternate is None:
			return string
		return string.replace(self.alternate, self.separator)

	def fold(self, string:str) -> str:
		"""
		# Case fold &string for comparison. Identity for case sensitive flavors.
		"""
		if self.case_sensitive:
			return string
		return string.lower()

	def split_anchor(self, string:str) -> tuple[str, str, str]:
		"""
		# Separate the drive and root from a normalized &string.
		# Returns the drive, the root, and the unconsumed remainder.
		"""
		sep = self.separator
		stripped = string.lstrip(sep)
		root = sep if len(stripped) != len(string) else ''
		return '', root, stripped

	def parse(self, string:str) -> Parsed:
		"""
		# Decompose &string into `(drive, root, tail)`.

		# Never fails; empty and `.` fragments are dropped and `..` is retained.
		"""
		return parse(self, string)

	def join(self, parsed:Sequence[Parsed]) -> Parsed:
		"""
		# Combine a sequence of parsed segments.

		# Rooted segments replace the accumulated root and tail, and a segment
		# designating a different drive replaces everything accumulated.
		"""
		drive = root = ''
		tail:list[str] = []
		fold = self.fold

		for (d, r, t) in parsed:
			if r:
				if d:
					drive = d
				root = r
				tail = list(t)
			elif d and fold(d) != fold(drive):
				drive, root, tail = d, '', list(t)
			else:
				tail.extend(t)

		return drive, root, tuple(tail)

	def format(self, drive:str, root:str, tail:Sequence[str]) -> str:
		"""
		# Render the components as a string. An empty path renders as an empty string.
		"""
		return drive + root + self.separator.join(tail)

	def as_posix(self, string:str) -> str:
		"""
		# Render &string using forward slashes.
		"""
		if self.separator == '/':
			return string
		return string.replace(self.separator, '/')

class Windows(Flavor):
	"""
	# Drive letter and UNC aware flavor.
	"""
	__slots__ = ()

	_unc = re.compile(r'^\\\\([^\\]+)\\([^\\]+)(.*)$', re.DOTALL)
	_drive_letter = re.compile(r'^[A-Za-z]:')

	def split_anchor(self, string:str) -> tuple[str, str, str]:
		sep = self.separator

		m = self._unc.match(string)
		if m is not None:
			host, share, remainder = m.groups()
			drive = '\\\\' + host + '\\' + share
			if remainder[:1] == sep:
				return drive, sep, remainder[1:]
			return drive, '', remainder

		drive = ''
		m = self._drive_letter.match(string)
		if m is not None:
			drive = m.group(0)
			string = string[2:]

		stripped = string.lstrip(sep)
		root = sep if len(stripped) != len(string) else ''
		return drive, root, stripped

	def join(self, parsed:Sequence[Parsed]) -> Parsed:
		drive, root, tail = super().join(parsed)

		# A share designates a directory; components below it require the root.
		if tail and not root and drive[:2] == '\\\\':
			root = self.separator

		return drive, root, tail

@cachedcalls(256)
def parse(flavor:Flavor, string:str) -> Parsed:
	if not string:
		return empty

	drive, root, remainder = flavor.split_anchor(flavor.normalize(string))
	tail = tuple(x for x in remainder.split(flavor.separator) if x and x != '.')
	return drive, root, tail

posix = Flavor('posix', '/', None, True)
windows = Windows('windows', '\\', '/', False)

flavors = {
	'posix': posix,
	'windows': windows,
}

def select(identifier:str) -> Flavor:
	"""
	# Retrieve the flavor named by &identifier.
	"""
	return flavors[identifier]

def host(name=os.name) -> Flavor:
	"""
	# The flavor of the running system.
	"""
	return windows if name == 'nt' else posix
