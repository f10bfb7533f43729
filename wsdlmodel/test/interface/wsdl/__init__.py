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

from lxml import etree

from wsdlmodel.util.xml import PARSER


WSDL_HEADER = """<?xml version="1.0" encoding="UTF-8"?>
<definitions xmlns="http://schemas.xmlsoap.org/wsdl/"
             xmlns:soap="http://schemas.xmlsoap.org/wsdl/soap/"
             xmlns:tns="%(tns)s"
             xmlns:xsd="http://www.w3.org/2001/XMLSchema"
             targetNamespace="%(tns)s">
"""

WSDL_FOOTER = """
</definitions>
"""


def build_wsdl(body, tns='http://example.org/TestService/'):
    """Wraps the given sections in a ``<definitions>`` tag that declares the
    usual prefixes."""

    return (WSDL_HEADER % {'tns': tns}) + body + WSDL_FOOTER


def build_root(s):
    return etree.fromstring(s.encode('utf8'), parser=PARSER)
