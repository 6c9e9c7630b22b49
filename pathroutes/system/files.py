"""
# Filesystem bound paths.

# &Path extends &..route.core.PurePath with methods performing I/O through its
# filesystem collaborator, &Path.fs. Methods that access the filesystem are
# prefixed with `fs_`, except for the construction forms &Path.cwd, &Path.home,
# &Path.absolute, and &Path.expanduser.
"""
import os
import stat
import errno
import contextlib
import collections
import logging
from collections.abc import Iterator
from typing import Optional

from ..route import flavor as flavors
from ..route import pattern as patterns
from ..route.core import PurePath, Segment
from . import filesystem
from . import policy as policies

logger = logging.getLogger(__name__)

class Status(tuple):
	"""
	# File status interface providing symbolic names for the data packed in
	# the system's status record, &system.
	"""
	__slots__ = ()

	_fs_type_map = filesystem.Filesystem._type_map

	_fs_subtype_map = {
		stat.S_IFBLK: 'block',
		stat.S_IFCHR: 'character',
	}

	@property
	def system(self) -> os.stat_result:
		"""
		# The status record produced by the system (&os.stat).
		"""
		return self[0]

	@property
	def filename(self) -> str:
		"""
		# The name of the file.
		"""
		return self[1]

	def __add__(self, operand):
		# Protect from unexpected addition.
		return NotImplemented

	@property
	def size(self) -> int:
		"""
		# Number of bytes contained by the file.
		"""
		return self.system.st_size

	@property
	def type(self, ifmt=stat.S_IFMT) -> str:
		"""
		# /`'directory'`/
			# A file containing other files.
		# /`'data'`/
			# A regular file containing bytes.
		# /`'pipe'`/
			# A named pipe; also known as a FIFO.
		# /`'socket'`/
			# A unix domain socket.
		# /`'device'`/
			# A character or block device file.
		# /`'link'`/
			# Status record of a link to a file.
		"""
		return self._fs_type_map.get(ifmt(self.system.st_mode), 'unknown')

	@property
	def subtype(self, *, ifmt=stat.S_IFMT) -> Optional[str]:
		"""
		# The kind of (id)`device`: (id)`block` or (id)`character`.
		# &None for status instances whose &type is not (id)`device`.
		"""
		return self._fs_subtype_map.get(ifmt(self.system.st_mode))

	@property
	def last_modified(self) -> float:
		"""
		# Time of last modification; seconds since the epoch.
		"""
		return self.system.st_mtime

	@property
	def last_accessed(self) -> float:
		return self.system.st_atime

	@property
	def executable(self, mask=stat.S_IXUSR|stat.S_IXGRP|stat.S_IXOTH) -> bool:
		"""
		# Whether the data file is considered executable by anyone.
		"""
		return (self.system.st_mode & mask) != 0 and self.type == 'data'

	@property
	def searchable(self, mask=stat.S_IXUSR|stat.S_IXGRP|stat.S_IXOTH) -> bool:
		"""
		# Whether the directory file is considered searchable by anyone.
		"""
		return (self.system.st_mode & mask) != 0 and self.type == 'directory'

class Path(PurePath):
	"""
	# Path implementation providing filesystem access.

	# [ Properties ]
	# /fs/
		# The &filesystem.Filesystem performing the system calls.
		# Subclasses may assign an alternative collaborator.
	"""
	__slots__ = ()

	fs:filesystem.Filesystem = filesystem.local

	def _fs_path(self) -> str:
		# The string passed to the collaborator.
		fs = self.fs
		if self.flavor is not fs.flavor:
			raise filesystem.UnsupportedCapability('flavor',
				f"{self.flavor.identifier} paths cannot be accessed on a {fs.flavor.identifier} host"
			)
		return str(self)

	def _reference(self, operand:Segment) -> 'Path':
		if isinstance(operand, Path) and operand.flavor is self.flavor:
			return operand
		return self.with_segments(operand)

	# Construction

	@classmethod
	def cwd(Class):
		"""
		# The current working directory of the process.
		"""
		path = Class(Class.fs.getcwd())
		path._fs_path()
		return path

	@classmethod
	def home(Class):
		"""
		# The home directory of the user.
		"""
		path = Class(Class.fs.expanduser('~'))
		path._fs_path()
		return path

	@classmethod
	@contextlib.contextmanager
	def fs_tmpdir(Class, *, prefix:Optional[str]=None):
		"""
		# Create a temporary directory using a context manager.

		# A &Path to the temporary directory is returned on entrance,
		# and that same path is destroyed on exit.
		"""
		d = Class.fs.mkdtemp(prefix)
		r = Class(d)
		try:
			yield r
		finally:
			r.fs_void()

	def absolute(self):
		"""
		# The path prefixed with the current working directory when relative.
		# Does not normalize `..` or resolve links.
		"""
		self._fs_path()
		if self.is_absolute():
			return self
		return self.with_segments(self.fs.getcwd(), self)

	def expanduser(self):
		"""
		# Substitute a leading `~` or `~user` component with the home directory.
		"""
		self._fs_path()
		drive, root, tail = self._decompose()
		if drive or root or not tail or tail[0][:1] != '~':
			return self

		return self.with_segments(self.fs.expanduser(tail[0]), *tail[1:])

	def fs_resolve(self, *, strict:bool=False):
		"""
		# Make the path absolute, resolving links and `..` components using the filesystem.
		"""
		return self.with_segments(self.fs.realpath(str(self.absolute()), strict=strict))

	# Relative resolution

	def _lexical_relative_to(self, other:Segment, *, walk_up:bool=False):
		return PurePath.relative_to(self, other, walk_up=walk_up)

	def relative_to(self, other:Segment, *, walk_up:bool=False, policy:str='exact'):
		"""
		# Construct the relative path that leads from &other to &self.

		# [ Parameters ]
		# /other/
			# The reference path.
		# /walk_up/
			# Permit `..` components when &self is not inside the reference.
		# /policy/
			# `'exact'` or `'parent'`; see &.policy. The `'auto'` policy
			# requires filesystem access and is provided by &fs_relative_to.
		"""
		return policies.relative_to(self, self._reference(other), walk_up, policy)

	def is_relative_to(self, other:Segment, *, walk_up:bool=False, policy:str='exact') -> bool:
		return policies.is_relative_to(self, self._reference(other), walk_up, policy)

	async def fs_relative_to(self, other:Segment, *, walk_up:bool=False, follow_links:bool=True):
		"""
		# Construct the relative path that leads from &other to &self using
		# &other itself when it is a directory and its parent otherwise.
		"""
		reference = self._reference(other)
		reference._fs_path()
		return await policies.auto_relative_to(self, reference, walk_up, follow_links)

	async def fs_is_relative_to(self, other:Segment, *, walk_up:bool=False, follow_links:bool=True) -> bool:
		reference = self._reference(other)
		reference._fs_path()
		return await policies.auto_is_relative_to(self, reference, walk_up, follow_links)

	# Queries

	def fs_status(self, *, follow_links:bool=True) -> Status:
		return Status((self.fs.status(self._fs_path(), follow_links), self.name))

	def fs_type(self, *, follow_links:bool=True) -> str:
		"""
		# The type of file the path points to.

		# [ Returns ]
		# - `'directory'`
		# - `'data'`
		# - `'link'`, only when &follow_links is &False
		# - `'pipe'`
		# - `'socket'`
		# - `'device'`
		# - `'void'`

		# If no file is present at the path or a broken link is followed, `'void'` will be returned.
		"""
		return self.fs.type(self._fs_path(), follow_links)

	def fs_exists(self, *, follow_links:bool=True) -> bool:
		return self.fs_type(follow_links=follow_links) != 'void'

	def fs_is_directory(self, *, follow_links:bool=True) -> bool:
		return self.fs_type(follow_links=follow_links) == 'directory'

	def fs_is_data(self, *, follow_links:bool=True) -> bool:
		return self.fs_type(follow_links=follow_links) == 'data'

	def fs_is_link(self) -> bool:
		return self.fs_type(follow_links=False) == 'link'

	# Enumeration

	def fs_iterfiles(self, /, type=None):
		"""
		# Generate &Path instances identifying the files held by the directory, &self.
		# By default, all file types are included, but if the &type parameter is given,
		# only files of that type are returned.

		# If &self is not a directory or cannot be searched, an empty iterator is returned.
		"""
		try:
			dl = self.fs.scan(self._fs_path())
		except OSError:
			# User must make explicit checks to interrogate permission/existence.
			return

		with dl as scan:
			if type is None:
				for de in scan:
					yield self/de.name
			elif type == 'directory':
				# Avoids the stat call in the last branch.
				for de in scan:
					if de.is_dir():
						yield self/de.name
			else:
				for de in scan:
					r = self/de.name
					if type == r.fs_type():
						yield r

	def fs_list(self, type='data'):
		"""
		# Retrieve the list of files contained by the directory referred to by &self.
		# Returns a pair, the sequence of directories and the sequence of files of &type.
		"""
		dirs = []
		files = []

		for sub in self.fs_iterfiles():
			typ = sub.fs_type()
			if typ == 'directory':
				dirs.append(sub)
			elif typ == type:
				files.append(sub)

		return (dirs, files)

	def _fs_entries(self, follow_links:bool):
		try:
			dl = self.fs.scan(self._fs_path())
		except OSError:
			return None

		dirs = []
		files = []
		with dl as scan:
			for de in scan:
				try:
					isdir = de.is_dir(follow_symlinks=follow_links)
				except OSError:
					isdir = False
				(dirs if isdir else files).append(de.name)

		return dirs, files

	def fs_walk(self, top_down:bool=True, *, follow_links:bool=False):
		"""
		# Generate triples, `(directory, dirnames, filenames)`, for &self and every
		# directory beneath it.

		# When &top_down is &True, &dirnames may be modified in place to limit descent.
		# Directories that cannot be read are skipped.
		"""
		entries = self._fs_entries(follow_links)
		if entries is None:
			return
		dirs, files = entries

		if top_down:
			yield self, dirs, files

		for name in dirs:
			yield from (self/name).fs_walk(top_down, follow_links=follow_links)

		if not top_down:
			yield self, dirs, files

	def _fs_select(self, test, depth:Optional[int]) -> Iterator['Path']:
		# Breadth first traversal yielding the files whose relative parts satisfy &test.
		queue = collections.deque([(self, ())])

		while queue:
			directory, prefix = queue.popleft()
			try:
				dl = self.fs.scan(directory._fs_path())
			except OSError:
				continue

			with dl as scan:
				for de in scan:
					parts = prefix + (de.name,)
					if test(parts):
						yield directory/de.name

					if depth is not None and len(parts) >= depth:
						continue

					try:
						isdir = de.is_dir(follow_symlinks=(depth is not None))
					except OSError:
						isdir = False
					if isdir:
						queue.append((directory/de.name, parts))

	def _glob_pattern(self, pattern:Segment) -> PurePath:
		p = PurePath(pattern, flavor=self.flavor)
		if p.is_absolute():
			raise ValueError(f"glob patterns must be relative: {str(p)!r}")
		if patterns.degenerate(str(p)):
			raise ValueError(f"unacceptable glob pattern: {pattern!r}")
		return p

	def fs_glob(self, pattern:Segment, *, case_sensitive:Optional[bool]=None) -> Iterator['Path']:
		"""
		# Generate the paths beneath &self whose relative form fully matches &pattern.

		# Without a `**` wildcard, traversal is limited to the number of components
		# in &pattern.
		"""
		p = self._glob_pattern(pattern)
		sep = self.flavor.separator
		expression = patterns.compile(self.flavor, str(p), case_sensitive, recursive=True)

		tail = p.tail
		if any('**' in x for x in tail):
			depth = None
		else:
			depth = len(tail)

		return self._fs_select((lambda parts: expression(sep.join(parts))), depth)

	def fs_rglob(self, pattern:Segment, *, case_sensitive:Optional[bool]=None) -> Iterator['Path']:
		"""
		# Generate the paths anywhere beneath &self whose trailing components match &pattern.
		"""
		p = self._glob_pattern(pattern)
		sep = self.flavor.separator
		expression = patterns.compile(self.flavor, str(p), case_sensitive, recursive=True)
		n = len(p.tail)

		return self._fs_select((lambda parts: expression(sep.join(parts[-n:]))), None)

	# Content

	def fs_open(self, mode:str='r', *args, **kw):
		"""
		# Open the file identified by the path. Returns the file object.
		"""
		return self.fs.open(self._fs_path(), mode, *args, **kw)

	def fs_load(self, *, mode='rb') -> bytes:
		with self.fs_open(mode) as f:
			return f.read()

	def fs_store(self, data:bytes, *, mode='wb'):
		with self.fs_open(mode) as f:
			f.write(data)
		return self

	def get_text_content(self, encoding:str='utf-8') -> str:
		"""
		# Retrieve the entire contents of the file as a &str.
		"""
		with self.fs_open('rt', encoding=encoding) as f:
			return f.read()

	def set_text_content(self, string:str, encoding:str='utf-8') -> None:
		"""
		# Modify the regular file identified by &self to contain the given &string.
		"""
		with self.fs_open('w', encoding=encoding) as f:
			f.write(string)

	# Mutation

	def fs_touch(self, *, exist_ok:bool=True):
		"""
		# Create an empty data file or update the modification time of an existing one.
		"""
		self.fs.touch(self._fs_path(), exist_ok)
		return self

	def fs_mkdir(self, *, parents:bool=False, exist_ok:bool=False):
		"""
		# Create a directory at the path.

		# [ Parameters ]
		# /parents/
			# Create missing leading directories.
		# /exist_ok/
			# Do not raise &FileExistsError when a directory is already present.
		"""
		fp = self._fs_path()

		if parents:
			self.fs.makedirs(fp, exist_ok=exist_ok)
			return self

		try:
			self.fs.mkdir(fp)
		except FileExistsError:
			if not exist_ok or not self.fs_is_directory():
				raise

		return self

	def fs_unlink(self, *, missing_ok:bool=False):
		try:
			self.fs.unlink(self._fs_path())
		except FileNotFoundError:
			if not missing_ok:
				raise

	def fs_rmdir(self):
		self.fs.rmdir(self._fs_path())

	def fs_void(self):
		"""
		# Remove the file or directory tree at the path. Nothing is done if
		# the file does not exist.
		"""
		fp = self._fs_path()
		typ = self.fs.type(fp, False)

		if typ == 'void':
			return
		logger.debug("removing %s %r", typ, fp)

		if typ == 'directory':
			self.fs.rmtree(fp)
		else:
			try:
				self.fs.unlink(fp)
			except FileNotFoundError:
				pass

	def fs_rename(self, target:Segment):
		"""
		# Move the file to &target. Returns the &Path of the new location.
		"""
		destination = self._reference(target)
		self.fs.rename(self._fs_path(), destination._fs_path())
		return destination

	def fs_replace(self, target:Segment):
		"""
		# Move the file to &target, overwriting any file present there.
		"""
		destination = self._reference(target)
		self.fs.replace(self._fs_path(), destination._fs_path())
		return destination

	def fs_copy(self, target:Segment, *, follow_links:bool=True, preserve_metadata:bool=False):
		"""
		# Copy the file or directory tree to &target. Returns the &Path of the copy.

		# [ Exceptions ]
		# /&OSError/
			# &target is the same path as &self or is inside the tree being copied.
		"""
		destination = self._reference(target)
		source = self.absolute()
		copy = destination.absolute()

		if copy == source:
			raise OSError(errno.EINVAL, "source and target are the same path", str(self))
		if copy.is_relative_to(source):
			raise OSError(errno.EINVAL, "target is inside of the source tree", str(destination))

		logger.debug("copying %r to %r", str(source), str(copy))
		self.fs.copy(source._fs_path(), copy._fs_path(), follow_links, preserve_metadata)
		return destination

	def fs_link(self, target:Segment, *, directory:bool=False):
		"""
		# Create a symbolic link at &self pointing to &target.

		# &target is written as given; relative targets are interpreted by the
		# system relative to the link's directory.
		"""
		if isinstance(target, PurePath):
			target = str(self._reference(target))
		else:
			target = os.fspath(target)

		self.fs.symlink(target, self._fs_path(), directory)
		return self

	def fs_readlink(self):
		"""
		# The path stored by the symbolic link at &self.
		"""
		return self.with_segments(self.fs.readlink(self._fs_path()))

class PosixPath(Path):
	__slots__ = ()
	_flavor_default = flavors.posix

class WindowsPath(Path):
	__slots__ = ()
	_flavor_default = flavors.windows
