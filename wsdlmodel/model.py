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

"""The ``wsdlmodel.model`` module contains the records that make up a parsed
service definition.

Every record is a namedtuple, so instances are immutable and compare by value.
Collections are tuples and mappings are read-only
:class:`types.MappingProxyType` views.

Types come in three shapes which share the ``name``, ``namespace``,
``element_form_qualified`` and ``namespace_prefix`` fields:

    * :class:`SimpleType` -- a ``<simpleType>`` that is not an enumeration.
    * :class:`ComplexType` -- a ``<complexType>`` with its properties.
    * :class:`EnumType` -- a ``<simpleType>`` with enumeration facets.
"""

from collections import namedtuple
from types import MappingProxyType

from wsdlmodel.const.xml import NS_XSD
from wsdlmodel.util import local_name
from wsdlmodel.interface.xml_schema.defn import get_primitive


TYPE_KIND_SIMPLE = 'simple'
TYPE_KIND_COMPLEX = 'complex'
TYPE_KIND_ENUM = 'enum'


def frozen_dict(d=None):
    if d is None:
        d = {}
    return MappingProxyType(dict(d))


class PropertyRecord(namedtuple('PropertyRecord',
            'name type is_required is_collection documentation',
            defaults=(True, False, None))):
    """A child element of a complex type's ``<sequence>``."""

    __slots__ = ()


class _TypeRecord(object):
    __slots__ = ()

    kind = None

    @property
    def is_enum(self):
        return False

    @property
    def is_array(self):
        return False

    @property
    def qualified_name(self):
        return "{%s}%s" % (self.namespace, self.name)


class SimpleType(_TypeRecord, namedtuple('SimpleType',
            'name namespace base_type element_form_qualified namespace_prefix',
            defaults=(None, False, None))):
    __slots__ = ()

    kind = TYPE_KIND_SIMPLE


class ComplexType(_TypeRecord, namedtuple('ComplexType',
            'name namespace properties base_type array_item_type '
            'element_form_qualified namespace_prefix',
            defaults=((), None, None, False, None))):
    """A complex type. When ``array_item_type`` is set, the type is a wrapper
    around an unbounded sequence of exactly one element and should be treated
    as a collection of ``array_item_type`` rather than as an object."""

    __slots__ = ()

    kind = TYPE_KIND_COMPLEX

    @property
    def is_array(self):
        return self.array_item_type is not None

    def get_property(self, name):
        for p in self.properties:
            if p.name == name:
                return p


class EnumType(_TypeRecord, namedtuple('EnumType',
            'name namespace values base_type element_form_qualified '
            'namespace_prefix',
            defaults=(None, False, None))):
    __slots__ = ()

    kind = TYPE_KIND_ENUM

    @property
    def is_enum(self):
        return True


class MessageRef(namedtuple('MessageRef', 'name element')):
    __slots__ = ()


class AuthHeaderRef(namedtuple('AuthHeaderRef', 'name element type_name')):
    """The header message an operation's binding declares in its input, along
    with the schema element it refers to and that element's local name."""

    __slots__ = ()


class OperationRecord(namedtuple('OperationRecord',
              'name soap_action documentation input output auth_header headers',
              defaults=(None, ()))):
    """An operation of a port type, with the soap action and the header
    messages of the binding operation it is bound to. ``headers`` is a tuple
    of :class:`MessageRef` instances, ``auth_header`` is set when a bound
    input declares a header that looks like it carries credentials."""

    __slots__ = ()

    @property
    def requires_auth(self):
        return self.auth_header is not None


class BindingRecord(namedtuple('BindingRecord',
                                     'name type transport operation_soap_actions',
                                     defaults=(frozen_dict(),))):
    __slots__ = ()


class PortRecord(namedtuple('PortRecord', 'name binding location')):
    __slots__ = ()


class ServiceRecord(namedtuple('ServiceRecord', 'name ports',
                                                               defaults=((),))):
    __slots__ = ()

    @property
    def default_location(self):
        """The address of the first port that has one, or ``None``."""

        for p in self.ports:
            if p.location:
                return p.location


class ServiceDefinition(namedtuple('ServiceDefinition',
                    'target_namespace namespaces types operations bindings '
                    'services')):
    """The result of parsing a Wsdl document.

    :param target_namespace: The ``targetNamespace`` of the document root or
        the empty string.
    :param namespaces: Read-only mapping of prefixes to namespace uris, as
        declared on the document root. The default namespace uses the empty
        string as prefix.
    :param types: Tuple of :class:`SimpleType`, :class:`ComplexType` and
        :class:`EnumType` instances, in document order.
    :param operations: Tuple of :class:`OperationRecord` instances.
    :param bindings: Tuple of :class:`BindingRecord` instances.
    :param services: Tuple of :class:`ServiceRecord` instances.
    """

    __slots__ = ()

    def get_type(self, name, namespace=None):
        """Returns the type with the given name or ``None``. Any namespace
        prefix in ``name`` is ignored."""

        name = local_name(name)
        for t in self.types:
            if t.name != name:
                continue
            if namespace is not None and t.namespace != namespace:
                continue
            return t

    def get_operation(self, name):
        for o in self.operations:
            if o.name == name:
                return o

    def get_binding(self, name):
        name = local_name(name)
        for b in self.bindings:
            if b.name == name:
                return b

    def get_service(self, name):
        for s in self.services:
            if s.name == name:
                return s

    def resolve_type(self, name):
        """Maps a type reference, as found in :attr:`PropertyRecord.type`, to
        either a type record from this definition or the name of the python
        type that corresponds to the xml schema primitive.

        Returns ``None`` when the reference can be resolved neither way, in
        which case it should be treated as an external type.
        """

        if not name:
            return None

        if ':' in name:
            prefix = name.split(':', 1)[0]
            if self.namespaces.get(prefix) == NS_XSD:
                return get_primitive(name)

        retval = self.get_type(name)
        if retval is not None:
            return retval

        return get_primitive(name)
