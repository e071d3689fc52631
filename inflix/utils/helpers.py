##############################################################################

##############################################################################

import logging

import numpy as np
from typing import Union
from prettytable import PrettyTable

from .error import LibError

logger = logging.getLogger(__name__)

###############################################################################


def label_to_string(label: str,
                    value: (float, str),
                    separator: str = "\n",
                    list_format: bool = False):
    """ Render one 'LABEL: value' line of an object report. With list_format
    a list value is printed one item per line under the first. """
    label = str(label)
    prefix = label + ": "

    if not (list_format and isinstance(value, list) and value):
        return prefix + str(value) + separator

    indent = "\n" + " " * len(prefix)
    return prefix + indent.join(str(v) for v in value) + separator

###############################################################################


def format_table(header: (list, tuple),
                 rows: (list, tuple)):
    """ PrettyTable of fixings, pillars or cashflows. Every row must have one
    entry per header column. """
    table = PrettyTable(header)

    for i, row in enumerate(rows):
        if len(row) != len(header):
            raise LibError(f"Row {i} has {len(row)} entries for "
                           f"{len(header)} columns")
        table.add_row(row)

    return table

###############################################################################


def to_usable_type(t):
    """ Map an annotation onto something `isinstance` accepts. Floats also
    accept ints and numpy scalars, lists also accept arrays and Optional
    accepts None. """
    origin = getattr(t, '__origin__', None)

    if origin is list:
        return (list, np.ndarray)

    if origin is Union:
        return tuple(to_usable_type(arg) for arg in t.__args__)

    if t is float:
        return (int, float, np.floating)

    if isinstance(t, tuple):
        return tuple(to_usable_type(arg) for arg in t)

    return t

###############################################################################


def _flatten_types(usable_type):
    if not isinstance(usable_type, tuple):
        return (usable_type,)

    flat = ()
    for tp in usable_type:
        flat += _flatten_types(tp)
    return flat

###############################################################################


def check_argument_types(func, values):
    """ Validate the arguments in values, usually locals(), against the
    annotations of func. Unannotated arguments are skipped. """
    for arg_name, annotation in func.__annotations__.items():

        if arg_name == "return" or arg_name not in values:
            continue

        value = values[arg_name]
        allowed = _flatten_types(to_usable_type(annotation))

        if not isinstance(value, allowed):
            logger.error("%s.%s: argument %s=%r has type %s, expected one of %s",
                         func.__module__, func.__name__, arg_name, value,
                         type(value).__name__,
                         [getattr(tp, "__name__", str(tp)) for tp in allowed])
            raise LibError("Argument Type Error")

###############################################################################
