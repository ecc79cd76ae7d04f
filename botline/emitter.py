def emit_message(command, target, text):
  return "{} {} :{}".format(command, target, text)
