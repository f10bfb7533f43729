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


def split_qname(qname):
    """Splits a prefixed or Clark-notation qualified name into a
    (prefix_or_namespace, local_name) tuple. The first member is ``None`` when
    the name is not qualified."""

    if qname.startswith("{"):
        ns, qn = qname[1:].split('}', 1)
        return ns, qn

    if ":" in qname:
        prefix, qn = qname.split(":", 1)
        return prefix, qn

    return None, qname


def local_name(qname):
    """Returns the part of a qualified name after the namespace prefix."""

    if qname is None:
        return None

    return split_qname(qname)[1]


def utf8(s):
    if isinstance(s, str):
        return s.encode('utf8')

    return s
