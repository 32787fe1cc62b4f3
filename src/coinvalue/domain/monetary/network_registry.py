from coinvalue.domain.monetary.network_parameters import NetworkParameters


# Dogecoin networks
DOGECOIN_MAIN = NetworkParameters("org.dogecoin.production", "DOGE", 8, 10_000_000_000)
DOGECOIN_TEST = NetworkParameters("org.dogecoin.test", "DOGE", 8, 10_000_000_000)

# Bitcoin networks
BITCOIN_MAIN = NetworkParameters("org.bitcoin.production", "BTC", 8, 21_000_000)

# Network used when a caller does not pass its own parameters
DEFAULT_NETWORK = DOGECOIN_MAIN

# Register all predefined networks
NetworkParameters.register(DOGECOIN_MAIN, overwrite=True)
NetworkParameters.register(DOGECOIN_TEST, overwrite=True)
NetworkParameters.register(BITCOIN_MAIN, overwrite=True)
