import collections
import regex

from botline import emitter


Command = collections.namedtuple("Command", ["name", "args"])


def parse_command(content, prefix):
  # without the prefix the first token is the address, e.g. "bot: echo a"
  if content[:1] == prefix:
    tokens = content[1:].split(" ")
  else:
    tokens = content.split(" ")[1:]

  if not tokens:
    return Command("", [])

  name, *args = tokens
  return Command(name.lower(), args)


def is_addressed(content, nick):
  if not nick:
    return False

  return regex.match(regex.escape(nick) + r".*? ", content) is not None


class Message(object):
  def __init__(self, bot, type, sender, dest, content, is_command=False):
    self.bot = bot
    self.type = type
    self.sender = sender
    self.dest = dest
    self.content = content
    self.command = None

    if is_command:
      self.make_command()

  def make_command(self):
    self.command = parse_command(self.content, self.bot.prefix)

  def __repr__(self):
    return "Message(type={!r}, sender={!r}, dest={!r}, content={!r}, " \
           "command={!r})".format(self.type, self.sender, self.dest,
                                  self.content, self.command)

  @property
  def is_sender_server(self):
    return "!" not in self.sender

  @property
  def sender_nick(self):
    nickname, _, _ = self.sender.partition("!")
    return nickname

  @property
  def sender_username(self):
    _, bang, rest = self.sender.partition("!")
    if not bang:
      return None

    username, _, _ = rest.partition("@")
    return username

  @property
  def sender_host(self):
    _, at, host = self.sender.partition("@")
    return host if at else None

  @property
  def is_sender_superuser(self):
    return self.bot.superusers.test(self.sender)

  @property
  def is_pm(self):
    return not self.dest.startswith("#")

  @property
  def was_addressed(self):
    return is_addressed(self.content, self.bot.nick)

  @property
  def content_without_address(self):
    if not self.was_addressed:
      return self.content

    _, _, rest = self.content.partition(" ")
    return rest

  @property
  def is_command(self):
    return self.command is not None

  @property
  def command_name(self):
    return self.command.name if self.command is not None else None

  @property
  def command_args(self):
    return self.command.args if self.command is not None else None

  def reply(self, text):
    if self.is_pm:
      self._send("PRIVMSG", self.sender_nick, text)
    else:
      self._send("PRIVMSG", self.dest, "{}: {}".format(self.sender_nick, text))

  def pm(self, text):
    self._send("PRIVMSG", self.sender_nick, text)

  def say(self, text):
    self._send("PRIVMSG", self.sender_nick if self.is_pm else self.dest, text)

  def notice(self, text):
    self._send("NOTICE", self.sender_nick, text)

  def _send(self, verb, target, text):
    self.bot.writeln(emitter.emit_message(verb, target, text))
