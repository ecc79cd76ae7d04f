import subprocess

import botline


def to_irc_lower(s):
  return s.casefold()


def get_version():
  try:
    hash = subprocess.check_output([
        "git", "rev-parse", "--short", "HEAD"],
        stderr=subprocess.DEVNULL).strip().decode("utf-8")
  except (OSError, subprocess.CalledProcessError):
    return botline.__version__
  else:
    return "{}+{}".format(botline.__version__, hash)
