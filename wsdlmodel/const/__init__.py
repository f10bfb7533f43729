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

"""The ``wsdlmodel.const`` package contains miscellanous constant values needed
in various parts of wsdlmodel."""


REQUEST_SUFFIX = 'Request'
"""The suffix for the input message name of an operation whose ``<input>`` tag
does not carry a ``name`` attribute."""

RESPONSE_SUFFIX = 'Response'
"""The suffix for the output message name of an operation whose ``<output>``
tag does not carry a ``name`` attribute."""

QUALIFIED = 'qualified'
"""The ``elementFormDefault`` value that makes child elements namespace
qualified."""

UNBOUNDED = 'unbounded'
"""The ``maxOccurs`` value of a repeating element."""

NAMESPACE_PREFIX_SKIP_LABELS = ('www', 'api', 'services')
"""Leading host name labels that are not used as a namespace prefix hint when
the host name has more than two labels."""


def add_request_suffix(string):
    """Concatenates REQUEST_SUFFIX to end of the given string"""
    return ''.join([string, REQUEST_SUFFIX])


def add_response_suffix(string):
    """Concatenates RESPONSE_SUFFIX to end of the given string"""
    return ''.join([string, RESPONSE_SUFFIX])
