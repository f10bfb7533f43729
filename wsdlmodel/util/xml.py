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


"""The `wsdlmodel.util.xml` module contains the entry points that turn Wsdl
documents into :class:`wsdlmodel.model.ServiceDefinition` instances.
"""

import logging
logger = logging.getLogger(__name__)

from lxml import etree

from wsdlmodel.error import DocumentParseError
from wsdlmodel.interface.wsdl.parser import WsdlParser
from wsdlmodel.util import utf8


# Neither entities nor anything on the network is resolved. Wsdl imports are
# not followed either.
PARSER = etree.XMLParser(remove_comments=True, resolve_entities=False,
                                                                no_network=True)

# str input is encoded to utf8 before parsing, so any encoding declaration in
# it must be ignored.
STRING_PARSER = etree.XMLParser(encoding='utf-8', remove_comments=True,
                                     resolve_entities=False, no_network=True)


def _parse_document(s):
    try:
        if isinstance(s, str):
            return etree.fromstring(utf8(s), parser=STRING_PARSER)

        return etree.fromstring(s, parser=PARSER)

    except etree.XMLSyntaxError as e:
        logger.debug("document is not well-formed: %s", e)
        raise DocumentParseError(e.msg or str(e), line=e.lineno) from e

    except ValueError as e:
        logger.debug("document could not be parsed: %s", e)
        raise DocumentParseError(str(e)) from e


def parse_wsdl_element(elt):
    """Parses a `<wsdl:definitions>` element and returns a ServiceDefinition
    object.

    :param elt: The `<wsdl:definitions>` element, an lxml.etree._Element
        instance.

    :return: :class:`wsdlmodel.model.ServiceDefinition` instance.
    """

    return WsdlParser().parse(elt)


def parse_wsdl_string(s):
    """Parses a Wsdl string and returns a ServiceDefinition object.

    :param s: The string or bytes object that contains the Wsdl document.
        Encoding declarations are honoured for bytes and ignored for strings,
        which are already decoded.

    :raises DocumentParseError: When ``s`` is not a well-formed xml document.

    :return: :class:`wsdlmodel.model.ServiceDefinition` instance.
    """

    return parse_wsdl_element(_parse_document(s))


def parse_wsdl_file(file_name):
    """Parses a Wsdl file and returns a ServiceDefinition object.

    :param file_name: The path to the file that contains the Wsdl document
        to be parsed.

    :return: :class:`wsdlmodel.model.ServiceDefinition` instance.
    """

    with open(file_name, 'rb') as f:
        data = f.read()

    logger.debug("parsing %s (%d bytes)", file_name, len(data))

    return parse_wsdl_string(data)
