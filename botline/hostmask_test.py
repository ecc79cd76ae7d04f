import unittest

from botline import hostmask


class HostmaskMatcherTest(unittest.TestCase):
  def test_match(self):
    matcher = hostmask.HostmaskMatcher(["*!*@admin.example.org"])
    assert matcher.test("alice!alice@admin.example.org")

  def test_no_match(self):
    matcher = hostmask.HostmaskMatcher(["*!*@admin.example.org"])
    assert not matcher.test("alice!alice@example.org")

  def test_match_is_anchored(self):
    matcher = hostmask.HostmaskMatcher(["alice!*@*"])
    assert not matcher.test("malice!m@example.org")

  def test_case_insensitive(self):
    matcher = hostmask.HostmaskMatcher(["Alice!*@*.Example.org"])
    assert matcher.test("alice!al@Host.EXAMPLE.org")

  def test_any_pattern(self):
    matcher = hostmask.HostmaskMatcher(["bob!*@*", "*!*@trusted.net"])
    assert matcher.test("bob!b@example.org")
    assert matcher.test("carol!c@trusted.net")
    assert not matcher.test("carol!c@example.org")

  def test_empty(self):
    assert not hostmask.HostmaskMatcher().test("alice!al@example.org")

  def test_server_name(self):
    matcher = hostmask.HostmaskMatcher(["*!*@*"])
    assert not matcher.test("irc.example.org")
