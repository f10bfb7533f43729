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

"""The ``wsdlmodel.const.xml`` module contains the namespace uris of the
sections of a Wsdl 1.1 document and helpers that build Clark-notation tag names
out of them.
"""

NS_XSD = 'http://www.w3.org/2001/XMLSchema'
NS_WSDL11 = 'http://schemas.xmlsoap.org/wsdl/'
NS_WSDL11_SOAP = 'http://schemas.xmlsoap.org/wsdl/soap/'
NS_SOAP11_HTTP = 'http://schemas.xmlsoap.org/soap/http'


def Tnswrap(ns):
    return lambda s: "{%s}%s" % (ns, s)

XSD = Tnswrap(NS_XSD)
WSDL11 = Tnswrap(NS_WSDL11)
WSDL11_SOAP = Tnswrap(NS_WSDL11_SOAP)
