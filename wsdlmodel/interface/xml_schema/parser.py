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

# Only the subset of the Xml Schema standard that is needed to describe the
# messages of a Soap service is implemented. <import> and <include> tags are
# not followed.


import logging
logger = logging.getLogger(__name__)

from urllib.parse import urlsplit

from wsdlmodel.const import QUALIFIED
from wsdlmodel.const import UNBOUNDED
from wsdlmodel.const import NAMESPACE_PREFIX_SKIP_LABELS
from wsdlmodel.const.xml import XSD

from wsdlmodel.model import SimpleType
from wsdlmodel.model import ComplexType
from wsdlmodel.model import EnumType
from wsdlmodel.model import PropertyRecord

from wsdlmodel.util import split_qname
from wsdlmodel.util.color import G, B, YEL


def get_namespace_prefix(tns):
    """Derives a short prefix hint from the host name of the given namespace
    uri, e.g. ``swbc`` for ``http://www.swbc.com/``. Returns ``None`` when the
    namespace has no host name."""

    try:
        host = urlsplit(tns).hostname
    except ValueError:
        return None

    if not host:
        return None

    labels = host.split('.')
    if len(labels) > 2 and labels[0] in NAMESPACE_PREFIX_SKIP_LABELS:
        labels = labels[1:]

    return labels[0] or None


def get_documentation(elt):
    """Returns the text of the ``<annotation><documentation>`` child of the
    given element, or ``None``."""

    doc = elt.find('%s/%s' % (XSD('annotation'), XSD('documentation')))
    if doc is None:
        return None

    return ''.join(doc.itertext())


class XmlSchemaParser(object):
    """Extracts type records from the inline ``<schema>`` tags of a Wsdl
    document. An instance should parse exactly one ``<types>`` section.
    """

    def __init__(self, indent=0):
        self.indent = indent
        self.retval = []

        self.tns = None
        self.element_form_qualified = False
        self.namespace_prefix = None

    def debug0(self, s, *args, **kwargs):
        logger.debug("%s%s" % ("  " * self.indent, s), *args, **kwargs)

    def debug1(self, s, *args, **kwargs):
        logger.debug("%s%s" % ("  " * (self.indent + 1), s), *args, **kwargs)

    def debug2(self, s, *args, **kwargs):
        logger.debug("%s%s" % ("  " * (self.indent + 2), s), *args, **kwargs)

    def process_element(self, e):
        """Returns a :class:`PropertyRecord` for an ``<element>`` inside a
        ``<sequence>``."""

        name = e.get('name')
        tn = e.get('type')

        ref = e.get('ref')
        if ref is not None:
            if name is None:
                name = split_qname(ref)[1]
            if tn is None:
                tn = ref

        if name is None:
            self.debug2("element without a name, using empty string")
            name = ''

        if tn is None:
            self.debug2("element %r has no type, using empty string", name)
            tn = ''

        return PropertyRecord(
            name=name,
            type=tn,
            is_required=(e.get('minOccurs') != "0"),
            is_collection=(e.get('maxOccurs') == UNBOUNDED),
            documentation=get_documentation(e),
        )

    def get_base_type(self, c):
        for tag in ('complexContent', 'simpleContent'):
            content = c.find(XSD(tag))
            if content is None:
                continue

            for derivation in ('extension', 'restriction'):
                d = content.find(XSD(derivation))
                if d is not None:
                    return d.get('base')

    def process_complex_type(self, c, name=None):
        if name is None:
            name = c.get('name')

        if name is None:
            self.debug1("complex type without a name, using empty string")
            name = ''

        self.debug1("adding complex type: %s", name)

        properties = []
        sequence = next(c.iter(XSD('sequence')), None)
        if sequence is not None:
            for e in sequence.iterfind(XSD('element')):
                p = self.process_element(e)
                properties.append(p)
                self.debug2("    found: %r(%s)", p.name, p.type)

        array_item_type = None
        if len(properties) == 1 and properties[0].is_collection:
            array_item_type = properties[0].type
            self.debug2("%s is an array of %s", name, array_item_type)

        return ComplexType(
            name=name,
            namespace=self.tns,
            properties=tuple(properties),
            base_type=self.get_base_type(c),
            array_item_type=array_item_type,
            element_form_qualified=self.element_form_qualified,
            namespace_prefix=self.namespace_prefix,
        )

    def process_simple_type(self, s):
        """Returns an :class:`EnumType` when the ``<simpleType>`` restricts its
        base to a set of values, a :class:`SimpleType` otherwise."""

        name = s.get('name')
        if name is None:
            self.debug1("simple type without a name, using empty string")
            name = ''

        restriction = s.find(XSD('restriction'))
        base_name = None
        if restriction is not None:
            base_name = restriction.get('base')

            values = [e.get('value', '')
                               for e in restriction.iterfind(XSD('enumeration'))]
            if len(values) > 0:
                self.debug1("adding enum type: %s %r", name, values)
                return EnumType(
                    name=name,
                    namespace=self.tns,
                    values=tuple(values),
                    base_type=base_name,
                    element_form_qualified=self.element_form_qualified,
                    namespace_prefix=self.namespace_prefix,
                )

        self.debug1("adding simple type: %s", name)
        return SimpleType(
            name=name,
            namespace=self.tns,
            base_type=base_name,
            element_form_qualified=self.element_form_qualified,
            namespace_prefix=self.namespace_prefix,
        )

    def process_schema_element(self, e):
        """Returns a complex type named after a top-level ``<element>`` that
        defines its type inline, or ``None``."""

        c = e.find(XSD('complexType'))
        if c is None:
            self.debug1("skipping element %r: no inline complex type",
                                                                  e.get('name'))
            return None

        return self.process_complex_type(c, e.get('name', ''))

    def parse_schema(self, elt):
        self.tns = elt.get('targetNamespace', '')
        self.element_form_qualified = \
                                  elt.get('elementFormDefault') == QUALIFIED
        self.namespace_prefix = None
        if self.element_form_qualified:
            self.namespace_prefix = get_namespace_prefix(self.tns)

        self.debug0("%s processing complex types", B(self.tns))
        for c in elt.iterfind(XSD('complexType')):
            self.retval.append(self.process_complex_type(c))

        self.debug0("%s processing simple types", G(self.tns))
        for s in elt.iterfind(XSD('simpleType')):
            self.retval.append(self.process_simple_type(s))

        self.debug0("%s processing elements", YEL(self.tns))
        for e in elt.iterfind(XSD('element')):
            t = self.process_schema_element(e)
            if t is not None:
                self.retval.append(t)

        return self.retval

    def parse_types(self, types):
        """Parses every ``<schema>`` tag under the given ``<types>`` tag and
        returns the type records in document order."""

        if types is None:
            return self.retval

        for schema in types.iterfind(XSD('schema')):
            self.parse_schema(schema)

        return self.retval
