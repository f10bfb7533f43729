#
# wsdlmodel - Copyright (C) wsdlmodel contributors.
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2.1 of the License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301
#

"""The ``wsdlmodel.interface.wsdl.auth`` module detects the messages that
carry authentication headers.

Wsdl has no way of saying that a header carries credentials, so this is a
naming heuristic: a message is a candidate when its name, or the local name of
the element its part refers to, matches one of :data:`AUTH_HEADER_RULES`.
"""

import logging
logger = logging.getLogger(__name__)

from types import MappingProxyType

from wsdlmodel.const.xml import WSDL11
from wsdlmodel.const.xml import WSDL11_SOAP
from wsdlmodel.model import AuthHeaderRef
from wsdlmodel.model import MessageRef
from wsdlmodel.util import local_name


RULE_SUFFIX = 'suffix'
RULE_SUBSTRING = 'substring'

AUTH_HEADER_RULES = (
    (RULE_SUFFIX, 'AuthHeader'),
    (RULE_SUFFIX, 'Header'),
    (RULE_SUBSTRING, 'Auth'),
)
"""Checked in order, case-sensitive. The first match wins."""


def _match_rule(kind, token, name):
    if kind == RULE_SUFFIX:
        return name.endswith(token)

    if kind == RULE_SUBSTRING:
        return token in name

    raise ValueError("unknown rule kind %r" % (kind,))


def is_auth_header_name(name, rules=AUTH_HEADER_RULES):
    """Returns True when the given name looks like the name of an
    authentication header."""

    if not name:
        return False

    for kind, token in rules:
        if _match_rule(kind, token, name):
            return True

    return False


def get_message_parts(root):
    """Returns a read-only mapping of ``<message>`` name to the element
    reference of its first part, as written in the document. Messages without
    a name are left out, messages without parts map to the empty string."""

    retval = {}

    for m in root.iterfind(WSDL11('message')):
        name = m.get('name')
        if not name:
            continue

        part = m.find(WSDL11('part'))
        element = ''
        if part is not None:
            element = part.get('element') or part.get('type') or ''

        retval[name] = element

    return MappingProxyType(retval)


def find_auth_header_candidates(root, rules=AUTH_HEADER_RULES,
                                                                  messages=None):
    """Scans the ``<message>`` tags of the given ``<definitions>`` element.

    :param messages: The result of :func:`get_message_parts`, computed from
        ``root`` when not given.

    :return: A read-only mapping of message name to an ``(element, type_name)``
        tuple, where ``element`` is the element reference of the message's
        first part, as written in the document, and ``type_name`` is its local
        name.
    """

    if messages is None:
        messages = get_message_parts(root)

    retval = {}

    for name, element in messages.items():
        type_name = local_name(element)
        if is_auth_header_name(name, rules) or \
                                         is_auth_header_name(type_name, rules):
            logger.debug("auth header candidate: %s -> %s", name, element)
            retval[name] = (element, type_name)

    return MappingProxyType(retval)


def _iter_header_messages(binding_operation):
    input_ = binding_operation.find(WSDL11('input'))
    if input_ is None:
        return

    for header in input_.iterfind(WSDL11_SOAP('header')):
        message = local_name(header.get('message'))
        if message is not None:
            yield message


def get_headers(binding_operation, messages):
    """Returns a tuple of :class:`MessageRef` instances, one per
    ``<soap:header>`` in the ``<input>`` of the given binding ``<operation>``,
    in document order. Header messages that are not declared in the document
    get an empty element."""

    return tuple(MessageRef(name=m, element=messages.get(m, ''))
                                for m in _iter_header_messages(binding_operation))


def get_auth_header(binding_operation, candidates):
    """Returns an :class:`AuthHeaderRef` when the ``<input>`` of the given
    binding ``<operation>`` declares a ``<soap:header>`` whose message is one
    of the candidates, ``None`` otherwise."""

    for message in _iter_header_messages(binding_operation):
        candidate = candidates.get(message)
        if candidate is not None:
            element, type_name = candidate
            return AuthHeaderRef(name=message, element=element,
                                                            type_name=type_name)

    return None
