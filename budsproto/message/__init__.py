"""Protocol messages: framing, commands, parsed updates and debug data."""