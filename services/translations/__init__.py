# -*- coding: utf-8 -*-
"""Translation tables."""
