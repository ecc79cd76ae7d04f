import fnmatch
import regex

from botline import util


class HostmaskMatcher(object):
  # case-insensitive shell-style globs over nick!user@host
  def __init__(self, patterns=()):
    self.patterns = list(patterns)
    self._compiled = [regex.compile(fnmatch.translate(util.to_irc_lower(p)))
                      for p in self.patterns]

  def test(self, hostmask):
    lowered = util.to_irc_lower(hostmask)
    return any(r.match(lowered) is not None for r in self._compiled)

  def __repr__(self):
    return "HostmaskMatcher({!r})".format(self.patterns)
