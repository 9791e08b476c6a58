# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Shared test fixtures and builders."""
