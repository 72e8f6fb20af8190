# -*- coding: utf-8 -*-
"""Lead-generation wizards."""
