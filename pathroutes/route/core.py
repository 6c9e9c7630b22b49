"""
# Lexical path implementation.

# &PurePath is an immutable value decomposed into a drive, a root, and a tail of
# components according to its &.flavor.Flavor. No operation defined here performs I/O,
# and Windows paths are fully usable on POSIX hosts and vice versa.

# The decomposition and the rendered string are computed on first access and stored
# on the instance. The computation is deterministic, so concurrent first accesses may
# repeat the work, but will always store identical values.

# Every transformation is constructed by &PurePath.with_segments so that subclasses
# remain closed under the path algebra.
"""
import os
import functools
from collections.abc import Sequence, Iterator
from typing import Optional, Union

from ..context.tools import consistency
from . import flavor as flavors
from . import pattern as patterns
from . import uri

class InvalidComponent(ValueError):
	"""
	# Exception raised when a replacement name, suffix, or stem cannot be applied.

	# [ Properties ]
	# /path/
		# The path that was being transformed.
	# /component/
		# The rejected replacement.
	# /reason/
		# The kind of violation.
		# /`'name'`/
			# The name was empty, `.`, or contained a separator.
		# /`'suffix'`/
			# The suffix did not start with a period.
		# /`'stem'`/
			# An empty stem was given for a path with a suffix.
		# /`'empty'`/
			# The path has no name to replace.
	"""

	def __init__(self, path, component, reason):
		self.path = path
		self.component = component
		self.reason = reason

	def __str__(self):
		r = self.reason
		if r == 'empty':
			return f"{self.path!s} has an empty name"
		elif r == 'stem':
			return f"{self.path!s} has a non-empty suffix; stem must not be empty"
		else:
			return f"invalid {r} {self.component!r} for {self.path!s}"

class AnchorMismatch(ValueError):
	"""
	# The operands of a relative path computation have different drives or roots.
	# Walking up cannot reconcile distinct anchors.
	"""

	def __init__(self, path, reference):
		self.path = path
		self.reference = reference

	def __str__(self):
		return f"'{self.path!s}' and '{self.reference!s}' have different anchors"

class NotASubpath(ValueError):
	"""
	# The path is not a lexical descendant of the reference and walking up was not permitted.
	"""

	def __init__(self, path, reference):
		self.path = path
		self.reference = reference

	def __str__(self):
		return f"'{self.path!s}' is not in the subpath of '{self.reference!s}'"

def _reconstruct(Class, flavor, string):
	return Class(string, flavor=flavor)

class PathParents(Sequence):
	"""
	# The logical ancestors of a path, nearest first.

	# The sequence ends with the anchor for absolute paths and with `.` for
	# relative ones. Elements are constructed on access.
	"""
	__slots__ = ('_path', '_drive', '_root', '_tail')

	def __init__(self, path:'PurePath'):
		self._path = path
		self._drive, self._root, self._tail = path._decompose()

	def __len__(self):
		return len(self._tail)

	def __getitem__(self, index):
		if isinstance(index, slice):
			return tuple(self[i] for i in range(*index.indices(len(self))))

		n = len(self._tail)
		if index < 0:
			index += n
		if index < 0 or index >= n:
			raise IndexError(index)

		return self._path._from_parsed(self._drive, self._root, self._tail[:n-index-1])

	def __iter__(self):
		current = self._path
		while True:
			parent = current.parent
			if str(parent) == str(current):
				# Anchor or "." reached.
				break
			yield parent
			current = parent

	def __repr__(self):
		return "<%s.parents>" %(repr(self._path),)

Segment = Union[str, 'PurePath', os.PathLike]

@functools.total_ordering
class PurePath(object):
	"""
	# Path manipulation without filesystem access.

	# [ Properties ]
	# /flavor/
		# The &.flavor.Flavor governing parsing, rendering, and comparison.
	"""
	__slots__ = ('flavor', '_segments', '_parsed', '_string',)

	# Flavor used when none is given to the constructor; &None selects the host's.
	_flavor_default:Optional[flavors.Flavor] = None

	def __init__(self, *segments:Segment, flavor:Optional[flavors.Flavor]=None,
			fspath=os.fspath, isinstance=isinstance,
		):
		if flavor is None:
			flavor = self._flavor_default or flavors.host()
		self.flavor = flavor

		raw = []
		add = raw.append
		for x in segments:
			if isinstance(x, PurePath):
				if x.flavor is flavor:
					add(x)
				else:
					add(str(x))
				continue

			s = fspath(x)
			if not isinstance(s, str):
				raise TypeError(
					"path segments must be str or os.PathLike returning str, not "
					+ type(s).__name__
				)
			add(s)

		self._segments = tuple(raw)

	def with_segments(self, *segments:Segment):
		"""
		# Construct a new path of the same type and flavor as &self from &segments.

		# All derived paths are created by this method; subclasses requiring
		# additional state should override it.
		"""
		return self.__class__(*segments, flavor=self.flavor)

	def _from_parsed(self, drive:str, root:str, tail:Sequence[str]):
		# Construct using already decomposed parts.
		string = self.flavor.format(drive, root, tail) or '.'
		path = self.with_segments(string)
		path._parsed = (drive, root, tuple(tail))
		path._string = string
		return path

	def _decompose(self) -> flavors.Parsed:
		try:
			return self._parsed
		except AttributeError:
			pass

		f = self.flavor
		parsed = [
			x._decompose() if isinstance(x, PurePath) else f.parse(x)
			for x in self._segments
		]
		if len(parsed) == 1:
			p = parsed[0]
		else:
			p = f.join(parsed)

		self._parsed = p
		return p

	def _coerce(self, operand:Segment):
		if isinstance(operand, PurePath) and operand.flavor is self.flavor:
			return operand
		return self.with_segments(operand)

	# String forms

	def __str__(self):
		try:
			return self._string
		except AttributeError:
			pass

		s = self._string = self.flavor.format(*self._decompose()) or '.'
		return s

	def __fspath__(self) -> str:
		return str(self)

	def __repr__(self):
		if self.flavor is (self._flavor_default or flavors.host()):
			return "%s(%r)" %(self.__class__.__name__, self.as_posix())
		return "%s(%r, flavor=%r)" %(self.__class__.__name__, self.as_posix(), self.flavor)

	def __reduce__(self):
		return (_reconstruct, (self.__class__, self.flavor, str(self)))

	def as_posix(self) -> str:
		"""
		# The rendered path using forward slashes.
		"""
		return self.flavor.as_posix(str(self))

	def as_uri(self) -> str:
		"""
		# The `file:` URI designating the path.
		# Raises &ValueError for relative paths.
		"""
		if not self.is_absolute():
			raise ValueError(f"relative path '{self!s}' cannot be expressed as a file URI")
		return uri.encode(self.flavor, *self._decompose())

	@classmethod
	def from_uri(Class, string:str, *, flavor:Optional[flavors.Flavor]=None):
		"""
		# Construct a path from a `file:` URI.
		"""
		if flavor is None:
			flavor = Class._flavor_default or flavors.host()
		return Class(uri.decode(flavor, string), flavor=flavor)

	# Comparison

	def _comparison_key(self):
		fold = self.flavor.fold
		drive, root, tail = self._decompose()
		return (fold(drive), root, tuple(map(fold, tail)))

	def __hash__(self):
		return hash((self.flavor.identifier, self._comparison_key()))

	def __eq__(self, operand):
		if not isinstance(operand, PurePath):
			return NotImplemented
		if operand.flavor is not self.flavor:
			return False
		return self._comparison_key() == operand._comparison_key()

	def __lt__(self, operand):
		if not isinstance(operand, PurePath) or operand.flavor is not self.flavor:
			return NotImplemented
		return self._comparison_key() < operand._comparison_key()

	# Components

	@property
	def drive(self) -> str:
		"""
		# The drive letter or UNC `\\\\host\\share` prefix; empty for POSIX paths.
		"""
		return self._decompose()[0]

	@property
	def root(self) -> str:
		"""
		# The separator if the path is rooted, otherwise an empty string.
		"""
		return self._decompose()[1]

	@property
	def tail(self) -> tuple[str, ...]:
		"""
		# The components following the anchor.
		"""
		return self._decompose()[2]

	@property
	def anchor(self) -> str:
		drive, root, tail = self._decompose()
		return drive + root

	@property
	def parts(self) -> tuple[str, ...]:
		drive, root, tail = self._decompose()
		anchor = drive + root
		if anchor:
			return (anchor,) + tail
		return tail

	@property
	def name(self) -> str:
		"""
		# The final component or an empty string when the tail is empty.
		"""
		tail = self._decompose()[2]
		if not tail:
			return ''
		return tail[-1]

	@property
	def suffix(self) -> str:
		"""
		# The last dot-suffix of &name including the period.

		# Leading periods are not considered: `.gitignore` has no suffix.
		"""
		name = self.name.lstrip('.')
		i = name.rfind('.')
		if i == -1:
			return ''
		return name[i:]

	@property
	def suffixes(self) -> list[str]:
		"""
		# All the dot-suffixes of &name. `archive.tar.gz` has `['.tar', '.gz']`.
		"""
		name = self.name
		if name[:1] == '.':
			name = name[1:]

		fragments = name.split('.')
		if len(fragments) <= 1:
			return []
		return ['.' + x for x in fragments[1:]]

	@property
	def stem(self) -> str:
		"""
		# The &name without its &suffix.
		"""
		name = self.name
		suffix = self.suffix
		if suffix:
			return name[:-len(suffix)]
		return name

	# Algebra

	def is_absolute(self) -> bool:
		"""
		# Whether the path has a root or a drive.
		"""
		drive, root, tail = self._decompose()
		return bool(root or drive)

	@property
	def parent(self):
		"""
		# The path without its final component. Anchors and `.` are their own parent.
		"""
		drive, root, tail = self._decompose()
		if not tail:
			return self
		return self._from_parsed(drive, root, tail[:-1])

	@property
	def parents(self) -> PathParents:
		return PathParents(self)

	def joinpath(self, *segments:Segment):
		"""
		# Extend the path with &segments.
		# An anchored segment replaces the accumulated anchor and components.
		"""
		return self.with_segments(self, *segments)

	def __truediv__(self, segment:Segment):
		try:
			return self.with_segments(self, segment)
		except TypeError:
			return NotImplemented

	def __rtruediv__(self, segment:Segment):
		try:
			return self.with_segments(segment, self)
		except TypeError:
			return NotImplemented

	def drop_segments(self, count:int):
		"""
		# Remove &count trailing components. The anchor is never removed.
		"""
		if count < 0:
			raise ValueError("segment count must not be negative: " + str(count))

		drive, root, tail = self._decompose()
		return self._from_parsed(drive, root, tail[:max(0, len(tail) - count)])

	def with_name(self, name:str):
		"""
		# Replace the final component with &name.
		"""
		f = self.flavor
		if not name or name == '.' or f.separator in name or (f.alternate and f.alternate in name):
			raise InvalidComponent(self, name, 'name')

		drive, root, tail = self._decompose()
		if not tail:
			raise InvalidComponent(self, name, 'empty')

		return self._from_parsed(drive, root, tail[:-1] + (name,))

	def with_suffix(self, suffix:str):
		"""
		# Replace the &suffix. An empty &suffix removes the existing one.
		"""
		if suffix and suffix[:1] != '.':
			raise InvalidComponent(self, suffix, 'suffix')

		stem = self.stem
		if not stem:
			raise InvalidComponent(self, suffix, 'empty')

		return self.with_name(stem + suffix)

	def with_stem(self, stem:str):
		suffix = self.suffix
		if not suffix:
			return self.with_name(stem)
		elif not stem:
			raise InvalidComponent(self, stem, 'stem')

		return self.with_name(stem + suffix)

	def relative_to(self, other:Segment, *, walk_up:bool=False):
		"""
		# Construct the relative path that leads from &other to &self.

		# [ Parameters ]
		# /other/
			# The reference path.
		# /walk_up/
			# Permit `..` components when &self is not inside &other.

		# [ Exceptions ]
		# /&AnchorMismatch/
			# The anchors differ; raised regardless of &walk_up.
		# /&NotASubpath/
			# &self is not inside &other and &walk_up was not set.
		"""
		reference = self._coerce(other)
		fold = self.flavor.fold

		if fold(self.anchor) != fold(reference.anchor):
			raise AnchorMismatch(self, reference)

		tail = self.tail
		rtail = reference.tail
		cl = consistency(map(fold, tail), map(fold, rtail))

		if cl < len(rtail) and not walk_up:
			raise NotASubpath(self, reference)

		return self._from_parsed('', '', ('..',) * (len(rtail) - cl) + tail[cl:])

	def is_relative_to(self, other:Segment) -> bool:
		"""
		# Whether &self is lexically inside &other.
		"""
		try:
			self.relative_to(other)
		except ValueError:
			return False
		return True

	# Matching

	def match(self, pattern:Segment, *, case_sensitive:Optional[bool]=None) -> bool:
		"""
		# Whether the trailing components of &self match &pattern.

		# The pattern is aligned to the right: a relative pattern with N components
		# is matched against the last N components of the path and never sees the
		# anchor. Anchored patterns only match complete paths.
		"""
		p = self._coerce_pattern(pattern)
		if p is None:
			return False

		pdrive, proot, ptail = p._decompose()
		if pdrive or proot:
			subject = str(self)
		else:
			drive, root, tail = self._decompose()
			n = len(ptail)
			if n > len(tail):
				return False
			subject = self.flavor.separator.join(tail[len(tail)-n:])

		return patterns.compile(self.flavor, str(p), case_sensitive)(subject)

	def full_match(self, pattern:Segment, *, case_sensitive:Optional[bool]=None) -> bool:
		"""
		# Whether the entire path matches &pattern. `**` spans separators.
		"""
		p = self._coerce_pattern(pattern)
		if p is None:
			return False

		return patterns.compile(self.flavor, str(p), case_sensitive)(str(self))

	def _coerce_pattern(self, operand:Segment):
		if isinstance(operand, PurePath):
			if str(operand) == '.':
				return None
		elif patterns.degenerate(os.fspath(operand)):
			return None

		return self._coerce(operand)

class PurePosixPath(PurePath):
	"""
	# &PurePath using the POSIX flavor regardless of the host.
	"""
	__slots__ = ()
	_flavor_default = flavors.posix

class PureWindowsPath(PurePath):
	"""
	# &PurePath using the drive and UNC flavor regardless of the host.
	"""
	__slots__ = ()
	_flavor_default = flavors.windows
