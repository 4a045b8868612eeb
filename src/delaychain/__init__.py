"""
Delay Chain GUI - touchscreen remote for the effects pedal
==========================================================

Renders the pedal's current effect, parameter readouts and dials, and
forwards touches and the viewport size back to the pedal over OSC.

Main Classes:
- GUIController: Frame loop tying display, OSC link and parameter state

Submodules:
- delaychain.params: Parameter buffer and effect table
- delaychain.render: Frame layout and rasterization
- delaychain.display: Framebuffer and display backends (pygame/headless)
- delaychain.input: Touch/pointer input and gesture suppression
- delaychain.link: OSC control sender and buffer receiver
"""

from .controller import GUIController

__version__ = '0.1.0'

__all__ = ['GUIController', 'params', 'render', 'display', 'input', 'link']
