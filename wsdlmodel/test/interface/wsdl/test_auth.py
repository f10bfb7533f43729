#!/usr/bin/env python
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

import logging
logging.basicConfig(level=logging.DEBUG)

import unittest

from wsdlmodel import parse_wsdl_string
from wsdlmodel.const.xml import WSDL11
from wsdlmodel.interface.wsdl.auth import AUTH_HEADER_RULES
from wsdlmodel.interface.wsdl.auth import RULE_SUFFIX
from wsdlmodel.interface.wsdl.auth import is_auth_header_name
from wsdlmodel.interface.wsdl.auth import find_auth_header_candidates
from wsdlmodel.interface.wsdl.auth import get_auth_header
from wsdlmodel.interface.wsdl.auth import get_headers
from wsdlmodel.interface.wsdl.auth import get_message_parts
from wsdlmodel.model import MessageRef

from . import build_wsdl
from . import build_root


MESSAGES = """
    <message name="AuthHeader">
        <part name="AuthHeader" element="tns:Credentials"/>
    </message>
    <message name="Login">
        <part name="parameters" element="tns:UserAuthentication"/>
    </message>
    <message name="TypedHeader">
        <part name="h" type="tns:TokenType"/>
    </message>
    <message name="GetThingIn">
        <part name="parameters" element="tns:GetThing"/>
    </message>
    <message name="EmptyHeader"/>
    <message>
        <part name="x" element="tns:NamelessAuthHeader"/>
    </message>
"""


class TestAuthHeaderName(unittest.TestCase):
    def test_rules(self):
        self.assertEqual([t for k, t in AUTH_HEADER_RULES],
                                                ['AuthHeader', 'Header', 'Auth'])

    def test_match(self):
        self.assertTrue(is_auth_header_name('SWBCAuthHeader'))
        self.assertTrue(is_auth_header_name('SessionHeader'))
        self.assertTrue(is_auth_header_name('AuthToken'))
        self.assertTrue(is_auth_header_name('UserAuthentication'))

    def test_no_match(self):
        self.assertFalse(is_auth_header_name('GetUserRequest'))
        self.assertFalse(is_auth_header_name('HeaderInfo'))
        self.assertFalse(is_auth_header_name(''))
        self.assertFalse(is_auth_header_name(None))

    def test_case_sensitive(self):
        self.assertFalse(is_auth_header_name('authtoken'))
        self.assertFalse(is_auth_header_name('SOAPHEADER'))

    def test_custom_rules(self):
        rules = ((RULE_SUFFIX, 'Credentials'),)

        self.assertTrue(is_auth_header_name('UserCredentials', rules))
        self.assertFalse(is_auth_header_name('AuthHeader', rules))

    def test_unknown_rule_kind(self):
        self.assertRaises(ValueError, is_auth_header_name, 'AuthHeader',
                                                          (('prefix', 'Auth'),))


class TestAuthHeaderCandidates(unittest.TestCase):
    def setUp(self):
        self.root = build_root(build_wsdl(MESSAGES))

    def test_candidates(self):
        candidates = find_auth_header_candidates(self.root)

        self.assertEqual(dict(candidates), {
            'AuthHeader': ('tns:Credentials', 'Credentials'),
            'Login': ('tns:UserAuthentication', 'UserAuthentication'),
            'TypedHeader': ('tns:TokenType', 'TokenType'),
            'EmptyHeader': ('', ''),
        })

    def test_candidates_are_read_only(self):
        candidates = find_auth_header_candidates(self.root)

        with self.assertRaises(TypeError):
            candidates['Other'] = ('', '')

    def test_header_lookup(self):
        candidates = find_auth_header_candidates(self.root)
        root = build_root(build_wsdl("""
            <binding name="B" type="tns:P">
                <operation name="WithAuth">
                    <input>
                        <soap:body use="literal"/>
                        <soap:header message="tns:Unrelated" part="x"/>
                        <soap:header message="tns:AuthHeader" part="AuthHeader"/>
                    </input>
                </operation>
                <operation name="WithoutAuth">
                    <input>
                        <soap:body use="literal"/>
                        <soap:header message="tns:GetThingIn" part="x"/>
                    </input>
                </operation>
                <operation name="WithoutInput"/>
            </binding>
        """))

        with_auth, without_auth, without_input = \
                        root.find(WSDL11('binding')).findall(WSDL11('operation'))

        header = get_auth_header(with_auth, candidates)
        self.assertEqual(header.name, 'AuthHeader')
        self.assertEqual(header.element, 'tns:Credentials')
        self.assertEqual(header.type_name, 'Credentials')

        self.assertEqual(get_auth_header(without_auth, candidates), None)
        self.assertEqual(get_auth_header(without_input, candidates), None)

        messages = get_message_parts(self.root)
        self.assertEqual(get_headers(with_auth, messages), (
            MessageRef('Unrelated', ''),
            MessageRef('AuthHeader', 'tns:Credentials'),
        ))
        self.assertEqual(get_headers(without_auth, messages),
                                (MessageRef('GetThingIn', 'tns:GetThing'),))
        self.assertEqual(get_headers(without_input, messages), ())

    def test_message_parts(self):
        messages = get_message_parts(self.root)

        self.assertEqual(len(messages), 5)
        self.assertEqual(messages['TypedHeader'], 'tns:TokenType')
        self.assertEqual(messages['EmptyHeader'], '')


class TestAuthHeaderAttachment(unittest.TestCase):
    def test_header_on_one_overload_only(self):
        defn = parse_wsdl_string(build_wsdl(MESSAGES + """
            <portType name="P">
                <operation name="Get">
                    <input name="GetPublic" message="tns:GetThingIn"/>
                </operation>
                <operation name="Get">
                    <input name="GetPrivate" message="tns:GetThingIn"/>
                </operation>
            </portType>
            <binding name="B" type="tns:P">
                <operation name="Get">
                    <input name="GetPublic"/>
                </operation>
                <operation name="Get">
                    <input name="GetPrivate">
                        <soap:header message="tns:AuthHeader" part="AuthHeader"/>
                    </input>
                </operation>
            </binding>
        """))

        self.assertEqual(defn.get_operation('GetPrivate').auth_header.name,
                                                                   'AuthHeader')

        # the bare operation name still finds the header of the sibling
        # binding operation.
        self.assertTrue(defn.get_operation('GetPublic').requires_auth)

    def test_header_of_matching_overload_is_preferred(self):
        defn = parse_wsdl_string(build_wsdl(MESSAGES + """
            <portType name="P">
                <operation name="Get">
                    <input message="tns:GetThingIn"/>
                </operation>
                <operation name="Get">
                    <input name="GetTyped" message="tns:GetThingIn"/>
                </operation>
            </portType>
            <binding name="B" type="tns:P">
                <operation name="Get">
                    <input>
                        <soap:header message="tns:AuthHeader" part="AuthHeader"/>
                    </input>
                </operation>
                <operation name="Get">
                    <input name="GetTyped">
                        <soap:header message="tns:TypedHeader" part="h"/>
                    </input>
                </operation>
            </binding>
        """))

        self.assertEqual(defn.get_operation('Get').auth_header.name,
                                                                   'AuthHeader')
        self.assertEqual(defn.get_operation('GetTyped').auth_header.name,
                                                                  'TypedHeader')

    def test_no_header_in_binding(self):
        defn = parse_wsdl_string(build_wsdl(MESSAGES + """
            <portType name="P">
                <operation name="Get">
                    <input message="tns:GetThingIn"/>
                </operation>
            </portType>
            <binding name="B" type="tns:P">
                <operation name="Get">
                    <input/>
                </operation>
            </binding>
        """))

        self.assertFalse(defn.get_operation('Get').requires_auth)


if __name__ == '__main__':
    unittest.main()
