# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for graphql-models."""
