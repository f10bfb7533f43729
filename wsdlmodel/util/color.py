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

"""Bright colored markers for the parser's debug log."""

import colorama


def _bright(color):
    return lambda s: ''.join((color, colorama.Style.BRIGHT, s,
                                                      colorama.Style.RESET_ALL))

R = _bright(colorama.Fore.RED)
G = _bright(colorama.Fore.GREEN)
B = _bright(colorama.Fore.BLUE)
YEL = _bright(colorama.Fore.YELLOW)
MAG = _bright(colorama.Fore.MAGENTA)
CYA = _bright(colorama.Fore.CYAN)


if __name__ == '__main__':
    colorama.init()
    print(R("RED"))
    print(G("GREEN"))
    print(B("BLUE"))
    print(YEL("YELLOW"))
    print(MAG("MAGENTA"))
    print(CYA("CYAN"))
