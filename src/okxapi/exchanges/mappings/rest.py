from okxapi.exchanges.okx.rest.v3 import OkxV3RestAPI
from okxapi.exchanges.okx.rest.v5 import OkxV5RestAPI


rest_api_map = {"v3": OkxV3RestAPI,
                "v5": OkxV5RestAPI
                }
