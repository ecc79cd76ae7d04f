import unittest

from botline import emitter


class EmitMessageTest(unittest.TestCase):
  def test_emit(self):
    assert emitter.emit_message("PRIVMSG", "#chan", "hello world") == \
        "PRIVMSG #chan :hello world"

  def test_emit_single_word(self):
    assert emitter.emit_message("NOTICE", "alice", "hi") == \
        "NOTICE alice :hi"

  def test_emit_leading_colon(self):
    assert emitter.emit_message("PRIVMSG", "alice", ":)") == \
        "PRIVMSG alice ::)"

  def test_emit_empty_text(self):
    assert emitter.emit_message("PRIVMSG", "alice", "") == "PRIVMSG alice :"

  def test_emit_empty_target(self):
    assert emitter.emit_message("PRIVMSG", "", "hello") == "PRIVMSG  :hello"
