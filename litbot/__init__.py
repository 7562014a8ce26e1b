# Literature companion: chat relay service and client helpers.
