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


"""The ``wsdlmodel.error`` module contains the exceptions raised by the
parser.

Only documents that are not well-formed are rejected. Missing attributes and
sections never raise, they end up as empty values in the returned model.
"""


class WsdlModelError(Exception):
    """Base class for all wsdlmodel errors."""


class DocumentParseError(WsdlModelError, ValueError):
    """Raised when the input is not a well-formed xml document.

    :param message: The diagnostic message of the underlying xml parser.
    :param line: Line number reported by the xml parser, if any.
    """

    def __init__(self, message, line=None):
        super(DocumentParseError, self).__init__(message)

        self.message = message
        self.line = line

    def __str__(self):
        if self.line is None:
            return "Could not parse document: %s" % (self.message,)
        return "Could not parse document (line %d): %s" % (self.line,
                                                                   self.message)
