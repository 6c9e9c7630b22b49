"""
# Resolution policies for relative path computation.

# A policy decides which path is used as the reference when a relative path is
# computed against an operand that may identify a data file rather than a directory.

# /`'exact'`/
	# The reference is used as given. Lexical; the default.
# /`'parent'`/
	# The reference's parent is always used. Lexical.
# /`'auto'`/
	# The filesystem is consulted; directories are used as given, anything else
	# is replaced with its parent. Only available through the asynchronous entry points.

# Symbolic links to directories are treated as directories when links are followed and
# the link path itself is used as the reference; the link's target is never substituted.
"""
import logging

logger = logging.getLogger(__name__)

policies = ('exact', 'parent', 'auto')

def select(reference, policy:str):
	"""
	# Identify the path that &reference should be replaced with under the lexical &policy.

	# [ Exceptions ]
	# /&ValueError/
		# &policy is `'auto'` or is not a known policy.
	"""
	if policy == 'exact':
		return reference
	elif policy == 'parent':
		return reference.parent
	elif policy == 'auto':
		raise ValueError(
			"the 'auto' resolution policy requires filesystem access; "
			"use the asynchronous fs_relative_to or fs_is_relative_to"
		)
	else:
		raise ValueError(f"unknown resolution policy {policy!r}; expected one of {policies!r}")

async def probe(reference, follow_links:bool=True):
	"""
	# Identify the path that &reference should be replaced with under the `'auto'` policy.

	# The directory probe of &reference's filesystem collaborator is the only
	# suspension point.
	"""
	if await reference.fs.probe_directory(str(reference), follow_links):
		return reference

	logger.debug("reference %r is not a directory; using parent", str(reference))
	return reference.parent

def relative_to(path, reference, walk_up:bool, policy:str):
	return path._lexical_relative_to(select(reference, policy), walk_up=walk_up)

def is_relative_to(path, reference, walk_up:bool, policy:str) -> bool:
	base = select(reference, policy)
	try:
		path._lexical_relative_to(base, walk_up=walk_up)
	except ValueError:
		return False
	return True

async def auto_relative_to(path, reference, walk_up:bool, follow_links:bool):
	base = await probe(reference, follow_links)
	return path._lexical_relative_to(base, walk_up=walk_up)

async def auto_is_relative_to(path, reference, walk_up:bool, follow_links:bool) -> bool:
	base = await probe(reference, follow_links)
	try:
		path._lexical_relative_to(base, walk_up=walk_up)
	except ValueError:
		return False
	return True
