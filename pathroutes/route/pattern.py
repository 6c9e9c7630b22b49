"""
# Glob pattern translation and matching.

# Patterns are translated into regular expressions that are always fully anchored
# against the subject string. The recognized wildcards are:

# /`*`/
	# Zero or more characters excluding the flavor's separator.
# /`**`/
	# Zero or more characters including separators.
# /`?`/
	# Exactly one character excluding the separator.

# All other characters, separators included, match themselves.
"""
import re
from typing import Optional, Callable

from .flavor import Flavor

def translate(flavor:Flavor, pattern:str, *, recursive=False, escape=re.escape) -> str:
	"""
	# Construct the regular expression source for &pattern under &flavor.
	# Alternate separators are normalized before translation.

	# When &recursive is &True, a `**` component followed by a separator
	# matches zero or more complete directory components.
	"""
	pattern = flavor.normalize(pattern)
	fsep = flavor.separator
	sep = escape(fsep)
	segment = '[^' + sep + ']'

	r = []
	add = r.append
	i = 0
	end = len(pattern)

	while i < end:
		c = pattern[i]

		if c == '*':
			if recursive and pattern[i:i+3] == '**' + fsep and (i == 0 or pattern[i-1] == fsep):
				add('(?:.*' + sep + ')?')
				i += 3
				continue
			if pattern[i+1:i+2] == '*':
				add('.*')
				i += 2
				continue
			add(segment + '*')
		elif c == '?':
			add(segment)
		elif c == flavor.separator:
			add(sep)
		else:
			add(escape(c))
		i += 1

	return ''.join(r)

def compile(flavor:Flavor, pattern:str, case_sensitive:Optional[bool]=None, *, recursive=False) -> Callable[[str], bool]:
	"""
	# Compile &pattern into a test function accepting the subject string.

	# [ Parameters ]
	# /flavor/
		# The dialect governing separators and the default case rule.
	# /pattern/
		# The glob pattern.
	# /case_sensitive/
		# Force or relax case sensitivity. &None selects the flavor's rule.
	# /recursive/
		# Permit `**` components to match zero directories; see &translate.
	"""
	if case_sensitive is None:
		case_sensitive = flavor.case_sensitive

	flags = re.DOTALL
	if not case_sensitive:
		flags |= re.IGNORECASE

	expression = re.compile(translate(flavor, pattern, recursive=recursive), flags)
	return (lambda subject: expression.fullmatch(subject) is not None)

def degenerate(pattern:str) -> bool:
	"""
	# Whether &pattern can never match; empty patterns and `'.'`.
	"""
	return pattern in ('', '.')
