# -*- coding: utf-8 -*-
"""Grid projection codecs: UTM, MGRS, British National Grid and Japan Grid."""
