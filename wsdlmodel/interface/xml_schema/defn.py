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

# To see the list of xml schema builtins recognized by code emitters, run this
# module.

from wsdlmodel.const.xml import NS_XSD
from wsdlmodel.util import local_name


# xml schema builtin -> name of the python type that holds its values
XSD_PRIMITIVES = {
    'string': 'str',
    'normalizedString': 'str',
    'token': 'str',
    'language': 'str',
    'Name': 'str',
    'NCName': 'str',
    'ID': 'str',
    'IDREF': 'str',
    'ENTITY': 'str',
    'NMTOKEN': 'str',
    'QName': 'str',
    'NOTATION': 'str',
    'anyURI': 'str',

    'IDREFS': 'list',
    'ENTITIES': 'list',
    'NMTOKENS': 'list',

    'boolean': 'bool',

    'int': 'int',
    'integer': 'int',
    'long': 'int',
    'short': 'int',
    'byte': 'int',
    'nonNegativeInteger': 'int',
    'nonPositiveInteger': 'int',
    'positiveInteger': 'int',
    'negativeInteger': 'int',
    'unsignedLong': 'int',
    'unsignedInt': 'int',
    'unsignedShort': 'int',
    'unsignedByte': 'int',

    'decimal': 'decimal.Decimal',
    'float': 'float',
    'double': 'float',

    'dateTime': 'datetime.datetime',
    'date': 'datetime.date',
    'time': 'datetime.time',
    'duration': 'datetime.timedelta',
    'gYearMonth': 'str',
    'gYear': 'str',
    'gMonthDay': 'str',
    'gDay': 'str',
    'gMonth': 'str',

    'base64Binary': 'bytes',
    'hexBinary': 'bytes',

    'anyType': 'object',
}


TYPE_MAP = dict([
    ("{%s}%s" % (NS_XSD, k), v) for k, v in XSD_PRIMITIVES.items()
])


def get_primitive(type_name):
    """Returns the python type name for the given xml schema builtin type
    reference or ``None`` if ``type_name`` does not name a builtin. Namespace
    prefixes are ignored, Clark-notation names must be in the xml schema
    namespace."""

    if type_name is None:
        return None

    if type_name.startswith('{'):
        return TYPE_MAP.get(type_name)

    return XSD_PRIMITIVES.get(local_name(type_name))


if __name__ == '__main__':
    from pprint import pprint
    pprint(TYPE_MAP)
