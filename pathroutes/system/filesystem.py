"""
# Host filesystem primitives used by &.files.Path.

# &Filesystem gathers the system calls performed by concrete paths so that they can be
# replaced as a unit. All methods accept and return path strings; &.files.Path performs
# the conversion to and from path instances.

# [ Elements ]
# /local/
	# The &Filesystem instance using the running system's &os, &shutil, and &tempfile.
"""
import os
import stat
import shutil
import tempfile
import asyncio
import logging
from typing import Optional

from ..route import flavor as flavors

logger = logging.getLogger(__name__)

class UnsupportedCapability(NotImplementedError):
	"""
	# Exception raised when a required primitive is not available.

	# [ Properties ]
	# /capability/
		# The identifier of the missing primitive; `'symlink'`, `'scandir'`, or `'flavor'`.
	# /reason/
		# Description of the condition that made the capability unavailable.
	"""

	def __init__(self, capability, reason):
		self.capability = capability
		self.reason = reason

	def __str__(self):
		return f"{self.capability!r} capability is not available: {self.reason}"

class Filesystem(object):
	"""
	# System call adapter for filesystem access.

	# [ Properties ]
	# /flavor/
		# The &flavors.Flavor of the paths accepted by the host.
	# /capabilities/
		# The set of primitive names that the host module provides.
	"""

	_type_map = {
		stat.S_IFIFO: 'pipe',
		stat.S_IFLNK: 'link',
		stat.S_IFREG: 'data',
		stat.S_IFDIR: 'directory',
		stat.S_IFSOCK: 'socket',
		stat.S_IFBLK: 'device',
		stat.S_IFCHR: 'device',
	}

	_primitives = (
		'scandir',
		'lstat',
		'symlink',
		'readlink',
		'link',
		'utime',
	)

	def __init__(self, os=os, shutil=shutil, tempfile=tempfile):
		self.os = os
		self.shutil = shutil
		self.tempfile = tempfile
		self.flavor = flavors.host(os.name)
		self.capabilities = frozenset(x for x in self._primitives if hasattr(os, x))

	def __repr__(self):
		return "%s(os=%s)" %(self.__class__.__name__, getattr(self.os, '__name__', self.os))

	def require(self, capability:str):
		"""
		# Raise &UnsupportedCapability when &capability is not present on the host.
		"""
		if capability not in self.capabilities:
			raise UnsupportedCapability(capability, "host module does not provide " + capability)

	# Status

	def status(self, path:str, follow_links:bool=True) -> os.stat_result:
		if follow_links:
			return self.os.stat(path)

		self.require('lstat')
		return self.os.lstat(path)

	def type(self, path:str, follow_links:bool=True, *, ifmt=stat.S_IFMT) -> str:
		"""
		# The type of the file at &path. `'void'` when nothing is present
		# or when a followed link is broken.
		"""
		try:
			s = self.status(path, follow_links)
		except (FileNotFoundError, NotADirectoryError):
			return 'void'

		return self._type_map.get(ifmt(s.st_mode), 'unknown')

	def is_directory(self, path:str, follow_links:bool=True) -> bool:
		return self.type(path, follow_links) == 'directory'

	async def probe_directory(self, path:str, follow_links:bool=True) -> bool:
		"""
		# Determine whether &path identifies a directory without blocking the event loop.
		"""
		r = await asyncio.to_thread(self.is_directory, path, follow_links)
		logger.debug("directory probe of %r (follow_links=%s): %s", path, follow_links, r)
		return r

	def scan(self, path:str):
		"""
		# Open a typed directory enumeration of &path. Returns the &os.scandir iterator.
		"""
		self.require('scandir')
		return self.os.scandir(path)

	# Content

	def open(self, path:str, mode:str='r', *args, **kw):
		return open(path, mode, *args, **kw)

	# Mutation

	def mkdir(self, path:str, mode:int=0o777):
		self.os.mkdir(path, mode)

	def makedirs(self, path:str, mode:int=0o777, exist_ok:bool=False):
		self.os.makedirs(path, mode, exist_ok=exist_ok)

	def touch(self, path:str, exist_ok:bool=True, mode:int=0o666):
		"""
		# Create an empty data file at &path or update its modification time.
		"""
		o = self.os
		if exist_ok:
			try:
				o.utime(path, None)
			except FileNotFoundError:
				pass
			else:
				return

		flags = o.O_CREAT | o.O_WRONLY
		if not exist_ok:
			flags |= o.O_EXCL

		o.close(o.open(path, flags, mode))

	def unlink(self, path:str):
		self.os.unlink(path)

	def rmdir(self, path:str):
		self.os.rmdir(path)

	def rmtree(self, path:str):
		self.shutil.rmtree(path)

	def rename(self, source:str, destination:str):
		self.os.rename(source, destination)

	def replace(self, source:str, destination:str):
		self.os.replace(source, destination)

	def copy(self, source:str, destination:str, follow_links:bool=True, preserve_metadata:bool=False):
		"""
		# Copy the file or directory tree at &source to &destination.

		# Links are recreated as links when &follow_links is &False.
		"""
		sh = self.shutil
		copyfile = sh.copy2 if preserve_metadata else sh.copyfile

		if self.type(source, follow_links) == 'directory':
			sh.copytree(source, destination, symlinks=not follow_links, copy_function=copyfile)
		else:
			copyfile(source, destination, follow_symlinks=follow_links)

	def symlink(self, target:str, path:str, directory:bool=False):
		self.require('symlink')
		self.os.symlink(target, path, target_is_directory=directory)

	def readlink(self, path:str) -> str:
		self.require('readlink')
		return self.os.readlink(path)

	# Resolution

	def realpath(self, path:str, strict:bool=False) -> str:
		return self.os.path.realpath(path, strict=strict)

	def getcwd(self) -> str:
		return self.os.getcwd()

	def expanduser(self, path:str) -> str:
		"""
		# Substitute the leading `~` or `~user` of &path.
		# Raises &RuntimeError when the home directory cannot be determined.
		"""
		expanded = self.os.path.expanduser(path)
		if expanded[:1] == '~':
			raise RuntimeError("could not determine home directory for " + repr(path))
		return expanded

	def mkdtemp(self, prefix:Optional[str]=None) -> str:
		return self.tempfile.mkdtemp(prefix=prefix)

local = Filesystem()
