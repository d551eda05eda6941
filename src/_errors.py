# -*- coding: utf-8 -*-

#  Copyright 2020 Taylor R Campbell
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.


class BeframeError(Exception):
    """Base class for all errors raised by beframe."""


class InvalidArgument(BeframeError, ValueError):
    """Absent or negative value, or non-positive width."""


class Overflow(BeframeError, OverflowError):
    """Value does not fit in the requested fixed width."""


class UnsupportedVariant(BeframeError, ValueError):
    """Hash algorithm/bit-length combination not implemented."""


class UnsupportedType(BeframeError, TypeError):
    """Value is not one of the shapes the frame dispatcher accepts."""


class InvalidEncoding(BeframeError, ValueError):
    """Malformed URL-safe base64 input."""
