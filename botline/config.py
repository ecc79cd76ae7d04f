import copy


class SchemaError(Exception):
  pass


class ParseError(Exception):
  def __init__(self, message):
    super().__init__(message)
    self.ok_message = message
    self.sections = []

  def __str__(self):
    if self.sections:
      return 'While validating section "{}": {}'.format(
          ".".join(self.sections), self.ok_message)
    return self.ok_message


class Type(object):
  @classmethod
  def _validate(cls, structure):
    raise NotImplementedError


class Section(Type):
  @classmethod
  def _validate(cls, structure):
    if not isinstance(structure, dict):
      raise ParseError("Expected section, but got {}: {}.".format(
          structure.__class__.__name__, structure))

    for field, subschema in cls.__dict__.items():
      if field.startswith("_"):
        continue

      try:
        substructure = structure[field]
      except KeyError:
        if isinstance(subschema, optional):
          substructure = copy.deepcopy(subschema.default)
        else:
          raise ParseError('Required field "{}" not found.'.format(field))
      else:
        if isinstance(subschema, optional):
          subschema = subschema.type
        try:
          substructure = validate(substructure, subschema)
        except ParseError as e:
          e.sections.insert(0, field)
          raise

      structure[field] = substructure
    return structure


class constrained(Type):
  def __init__(self, type, constraint):
    self.type = type
    self.constraint = constraint

  def _validate(self, structure):
    structure = validate(structure, self.type)
    ok, message = self.constraint(structure)
    if not ok:
      raise ParseError("Constraint failure: {}: {!r}.".format(
          message, structure))
    return structure


class optional(object):
  def __init__(self, type, default=None):
    self.type = type
    self.default = default


def validate(structure, schema):
  if isinstance(schema, list):
    if not isinstance(structure, list):
      raise ParseError("Expected list, but got {}: {}.".format(
          structure.__class__.__name__, structure))
    if len(schema) != 1:
      raise SchemaError(
          "Expected list with a single element as type, but got list with "
          "{} items.".format(len(schema)))

    subschema = schema[0]
    for i in range(len(structure)):
      try:
        structure[i] = validate(structure[i], subschema)
      except ParseError as e:
        e.sections.insert(0, "[{}]".format(i))
        raise
  elif isinstance(schema, Type) or issubclass(schema, Type):
    structure = schema._validate(structure)
  elif issubclass(schema, str):
    if not isinstance(structure, str):
      raise ParseError("Expected string, but got {}: {}.".format(
          structure.__class__.__name__, structure))
  else:
    raise SchemaError("Unknown validation type in schema: {}".format(schema))

  return structure
