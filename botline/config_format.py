from botline import config


def is_single_character(s):
  return (len(s) == 1 and not s.isspace(), "must be a single character")


def is_nickname(s):
  return (bool(s) and not any(c in s for c in " !@:#"),
          "not a valid nickname")


class Config(config.Section):
  nick = config.constrained(str, is_nickname)
  prefix = config.optional(config.constrained(str, is_single_character), "!")
  superusers = config.optional([str], [])
