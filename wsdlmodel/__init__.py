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

__version__ = '0.1.0'

from wsdlmodel.model import TYPE_KIND_SIMPLE
from wsdlmodel.model import TYPE_KIND_COMPLEX
from wsdlmodel.model import TYPE_KIND_ENUM
from wsdlmodel.model import ServiceDefinition
from wsdlmodel.model import SimpleType
from wsdlmodel.model import ComplexType
from wsdlmodel.model import EnumType
from wsdlmodel.model import PropertyRecord
from wsdlmodel.model import OperationRecord
from wsdlmodel.model import MessageRef
from wsdlmodel.model import AuthHeaderRef
from wsdlmodel.model import BindingRecord
from wsdlmodel.model import ServiceRecord
from wsdlmodel.model import PortRecord

from wsdlmodel.error import WsdlModelError
from wsdlmodel.error import DocumentParseError

from wsdlmodel.util.xml import parse_wsdl_string
from wsdlmodel.util.xml import parse_wsdl_element
from wsdlmodel.util.xml import parse_wsdl_file


def _vercheck():
    import sys
    if not hasattr(sys, "version_info") or sys.version_info < (3, 7):
        raise RuntimeError("wsdlmodel requires Python 3.7 or later. Trust us.")
_vercheck()
