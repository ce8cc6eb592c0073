# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Storefront web application: catalog, cart pricing and cookie authentication."""
