import logging
import sys
import yaml

from botline import config
from botline import config_format
from botline import hostmask
from botline import message
from botline import util

logger = logging.getLogger(__name__)


def load_config_file(filename):
  with open(filename, "r") as f:
    return yaml.safe_load(f)


class Bot(object):
  MAX_LENGTH = 510

  def __init__(self, cfg, write=None):
    self.write = write

    self.config = None
    self.nick = None
    self.superusers = hostmask.HostmaskMatcher()
    self.rehash(cfg)

  @classmethod
  def from_file(cls, filename, write=None):
    return cls(load_config_file(filename), write=write)

  def check_config(self, cfg):
    config.validate(cfg, config_format.Config)

  def rehash(self, cfg):
    try:
      self.check_config(cfg)
    except config.ParseError:
      logger.critical("Configuration invalid.")
      if self.config:
        logger.critical("Keeping old configuration.")
      raise
    else:
      self.config = cfg
      self.update_from_config()

  def update_from_config(self):
    self.nick = self.config["nick"]
    self.superusers = hostmask.HostmaskMatcher(self.config["superusers"])
    logger.info("Configured as {} (prefix {!r}, {} superuser mask(s)).".format(
        self.nick, self.prefix, len(self.superusers.patterns)))

  @property
  def prefix(self):
    return self.config["prefix"]

  def looks_like_command(self, content):
    return content[:1] == self.prefix or \
           message.is_addressed(content, self.nick)

  def message(self, type, sender, dest, content, is_command=False):
    return message.Message(self, type, sender, dest, content, is_command)

  def writeln(self, line):
    line, _, _ = line.partition("\r")
    line, _, _ = line.partition("\n")
    raw = line.encode("utf-8")[:self.MAX_LENGTH].decode("utf-8", "ignore")

    if self.write is None:
      logger.warning("No transport attached, dropping: {}".format(raw))
      return

    logger.debug("-> {}".format(raw))
    self.write(raw.encode("utf-8") + b"\r\n")


def main():
  import argparse
  import coloredlogs

  parser = argparse.ArgumentParser(
      description="Inspect how the bot would read a single message.",
      formatter_class=argparse.ArgumentDefaultsHelpFormatter)
  parser.add_argument("--config", "-c", help="file to load configuration from",
                      default="botline.conf")
  parser.add_argument("--verbose", "-v", help="enable verbose (debug) logging",
                      action="store_true", default=False)
  parser.add_argument("--type", help="message type or numeric",
                      default="PRIVMSG")
  parser.add_argument("--sender", help="nick!user@host or server name",
                      default="someone!someone@example.org")
  parser.add_argument("--dest", help="channel or the bot's nick",
                      default="#botline")
  parser.add_argument("--reply", help="reply text to emit to stdout")
  parser.add_argument("content", help="message content")

  args = parser.parse_args()

  coloredlogs.install(level=logging.DEBUG if args.verbose else logging.INFO)

  try:
    bot = Bot.from_file(args.config, write=sys.stdout.buffer.write)
  except (config.ParseError, yaml.YAMLError) as e:
    logging.fatal("Could not load configuration file, aborting.")
    logging.fatal(e)
    return 1
  except OSError as e:
    logging.fatal("Could not read {}, aborting.".format(args.config))
    logging.fatal(e)
    return 1

  logger.info("botline-{}".format(util.get_version()))

  msg = bot.message(args.type, args.sender, args.dest, args.content,
                    bot.looks_like_command(args.content))
  logger.info(repr(msg))
  logger.info("server origin: {}, nick: {}, host: {}, superuser: {}".format(
      msg.is_sender_server, msg.sender_nick, msg.sender_host,
      msg.is_sender_superuser))
  logger.info("private: {}, addressed: {}".format(msg.is_pm,
                                                  msg.was_addressed))

  if msg.is_command:
    logger.info("command {!r} with arguments {!r}".format(msg.command_name,
                                                           msg.command_args))

  if args.reply is not None:
    msg.reply(args.reply)
    sys.stdout.flush()

  return 0
