# SPDX-License-Identifier: MIT

type EntityId = str
