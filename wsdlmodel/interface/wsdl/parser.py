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

"""The ``wsdlmodel.interface.wsdl.parser`` module turns a Wsdl 1.1 document
into a :class:`wsdlmodel.model.ServiceDefinition`.

The abstract ``<portType>`` operations and the concrete ``<binding>``
operations are reconciled by name. Wsdl lets a binding carry several
operations with the same name that differ in their input message names, so
those are keyed by input name instead.
"""

import logging
logger = logging.getLogger(__name__)

from wsdlmodel.const import add_request_suffix
from wsdlmodel.const import add_response_suffix
from wsdlmodel.const.xml import WSDL11
from wsdlmodel.const.xml import WSDL11_SOAP

from wsdlmodel.model import frozen_dict
from wsdlmodel.model import MessageRef
from wsdlmodel.model import OperationRecord
from wsdlmodel.model import BindingRecord
from wsdlmodel.model import PortRecord
from wsdlmodel.model import ServiceRecord
from wsdlmodel.model import ServiceDefinition

from wsdlmodel.interface.wsdl.auth import find_auth_header_candidates
from wsdlmodel.interface.wsdl.auth import get_auth_header
from wsdlmodel.interface.wsdl.auth import get_headers
from wsdlmodel.interface.wsdl.auth import get_message_parts
from wsdlmodel.interface.xml_schema.parser import XmlSchemaParser

from wsdlmodel.util.color import R, G, B, YEL, MAG, CYA


STATE_START = 'start'
STATE_NAMESPACES_READ = 'namespaces_read'
STATE_TYPES_READ = 'types_read'
STATE_OPERATIONS_READ = 'operations_read'
STATE_BINDINGS_READ = 'bindings_read'
STATE_SERVICES_READ = 'services_read'
STATE_DONE = 'done'


def parse_namespaces(root):
    """Returns the prefix -> namespace uri declarations of the document root.
    The default namespace is stored under the empty string."""

    parent = root.getparent()
    inherited = {} if parent is None else parent.nsmap

    retval = {}
    for prefix, ns in root.nsmap.items():
        if inherited.get(prefix) == ns:
            continue
        if prefix is None:
            prefix = ''
        retval[prefix] = ns

    return retval


def get_operation_key(binding_operation):
    """Returns the key under which the soap action of the given binding
    ``<operation>`` is stored: the name of its ``<input>`` when there is one,
    the operation name otherwise."""

    input_ = binding_operation.find(WSDL11('input'))
    if input_ is not None:
        input_name = input_.get('name')
        if input_name:
            return input_name

    return binding_operation.get('name')


def get_soap_action(binding_operation):
    soap_operation = binding_operation.find(WSDL11_SOAP('operation'))
    if soap_operation is None:
        return None

    return soap_operation.get('soapAction') or None


def build_soap_action_map(binding):
    """Returns an operation key -> soap action dict for the given
    ``<binding>``. Operations without a name or without a soap action are
    left out."""

    retval = {}

    for o in binding.iterfind(WSDL11('operation')):
        if not o.get('name'):
            logger.debug("skipping unnamed operation in binding %r",
                                                            binding.get('name'))
            continue

        soap_action = get_soap_action(o)
        if soap_action is None:
            continue

        retval[get_operation_key(o)] = soap_action

    return retval


def get_documentation(elt):
    doc = elt.find(WSDL11('documentation'))
    if doc is None:
        return ''

    return ''.join(doc.itertext())


def get_fallback_soap_action(tns, name):
    if not tns:
        return ''

    return "%s/%s" % (tns.rstrip('/'), name)


def parse_operations(root):
    """Returns one :class:`OperationRecord` per ``<portType>`` operation.
    Operation names are unique: a port type operation that resolves to a name
    an earlier one already has, e.g. the same operation in the HttpGet port
    type of an asp.net service, is skipped."""

    tns = root.get('targetNamespace', '')
    bindings = list(root.iterfind(WSDL11('binding')))

    soap_actions = {}
    for b in bindings:
        soap_actions.update(build_soap_action_map(b))

    messages = get_message_parts(root)
    candidates = find_auth_header_candidates(root, messages=messages)

    binding_operations = {}
    for b in bindings:
        for o in b.iterfind(WSDL11('operation')):
            name = o.get('name')
            if name:
                binding_operations.setdefault(name, []).append(o)

    retval = []
    seen = set()
    for port_type in root.iterfind(WSDL11('portType')):
        for o in port_type.iterfind(WSDL11('operation')):
            name = o.get('name')
            if not name:
                logger.debug("skipping unnamed operation in port type %r",
                                                          port_type.get('name'))
                continue

            input_ = o.find(WSDL11('input'))
            output = o.find(WSDL11('output'))

            input_name = None
            if input_ is not None:
                input_name = input_.get('name') or None

            output_name = None
            if output is not None:
                output_name = output.get('name') or None

            resolved_name = input_name or name
            if resolved_name in seen:
                logger.debug("skipping operation %r in port type %r: "
                        "already defined", resolved_name, port_type.get('name'))
                continue
            seen.add(resolved_name)

            if input_name is not None and input_name in soap_actions:
                soap_action = soap_actions[input_name]
            elif name in soap_actions:
                soap_action = soap_actions[name]
            else:
                soap_action = get_fallback_soap_action(tns, input_name or name)
                logger.debug("operation %r has no soap action, using %r",
                                                              name, soap_action)

            # overloads share the bare name, so the binding operation bound
            # to this exact input is looked at first.
            bound = sorted(binding_operations.get(name, ()),
                     key=lambda bo: get_operation_key(bo) != resolved_name)

            auth_header = None
            for bo in bound:
                auth_header = get_auth_header(bo, candidates)
                if auth_header is not None:
                    break

            headers = ()
            for bo in bound:
                headers = get_headers(bo, messages)
                if len(headers) > 0:
                    break

            retval.append(OperationRecord(
                name=resolved_name,
                soap_action=soap_action,
                documentation=get_documentation(o),
                input=MessageRef(
                    name=input_name or add_request_suffix(name),
                    element='' if input_ is None else input_.get('message', ''),
                ),
                output=MessageRef(
                    name=output_name or add_response_suffix(name),
                    element='' if output is None else output.get('message', ''),
                ),
                auth_header=auth_header,
                headers=headers,
            ))

    return retval


def parse_bindings(root):
    retval = []

    for b in root.iterfind(WSDL11('binding')):
        soap_binding = b.find(WSDL11_SOAP('binding'))
        transport = ''
        if soap_binding is not None:
            transport = soap_binding.get('transport', '')

        retval.append(BindingRecord(
            name=b.get('name', ''),
            type=b.get('type', ''),
            transport=transport,
            operation_soap_actions=frozen_dict(build_soap_action_map(b)),
        ))

    return retval


def parse_services(root):
    retval = []

    for s in root.iterfind(WSDL11('service')):
        ports = []
        for p in s.iterfind(WSDL11('port')):
            address = p.find(WSDL11_SOAP('address'))
            location = ''
            if address is not None:
                location = address.get('location', '')

            ports.append(PortRecord(
                name=p.get('name', ''),
                binding=p.get('binding', ''),
                location=location,
            ))

        retval.append(ServiceRecord(name=s.get('name', ''), ports=tuple(ports)))

    return retval


class WsdlParser(object):
    """Runs the extractors one after the other on the same document tree and
    assembles their results. Every step runs even when the sections it reads
    are missing, in which case it yields empty collections.

    A new instance should be used for every document.
    """

    def __init__(self):
        self.state = STATE_START
        self.namespaces = None
        self.types = None
        self.operations = None
        self.bindings = None
        self.services = None

    def _transition(self, state, marker, s, *args):
        logger.debug("%s " + s, marker(state), *args)
        self.state = state

    def parse(self, root):
        """Parses the given ``<definitions>`` element.

        :param root: An ``lxml.etree._Element`` instance.
        :return: :class:`wsdlmodel.model.ServiceDefinition` instance.
        """

        assert self.state == STATE_START, "parser instances are single-use"

        tns = root.get('targetNamespace', '')

        self.namespaces = parse_namespaces(root)
        self._transition(STATE_NAMESPACES_READ, MAG, "%d namespaces",
                                                           len(self.namespaces))

        types = root.find(WSDL11('types'))
        self.types = XmlSchemaParser(indent=1).parse_types(types)
        self._transition(STATE_TYPES_READ, R, "%d types", len(self.types))

        self.operations = parse_operations(root)
        self._transition(STATE_OPERATIONS_READ, G, "%d operations",
                                                           len(self.operations))

        self.bindings = parse_bindings(root)
        self._transition(STATE_BINDINGS_READ, B, "%d bindings",
                                                             len(self.bindings))

        self.services = parse_services(root)
        self._transition(STATE_SERVICES_READ, YEL, "%d services",
                                                             len(self.services))

        retval = ServiceDefinition(
            target_namespace=tns,
            namespaces=frozen_dict(self.namespaces),
            types=tuple(self.types),
            operations=tuple(self.operations),
            bindings=tuple(self.bindings),
            services=tuple(self.services),
        )

        self._transition(STATE_DONE, CYA, "%s", tns)

        return retval
