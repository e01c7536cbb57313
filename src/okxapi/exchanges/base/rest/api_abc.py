from abc import ABC, abstractmethod


class APIAbc(ABC):


    # ================================================================================
    # ==== TIME
    # ================================================================================


    @abstractmethod
    def _server_time_ms(self, body: dict) -> int:
        '''Extract server time from the decoded body of the server time endpoint.

        Returns:
            milliseconds since epoch (int)

        Notes:
            Missing fields are not handled, KeyError/IndexError propagate to the caller.
        '''
        raise NotImplementedError




    # ================================================================================
    # ==== UTILS
    # ================================================================================


    @abstractmethod
    def _query_key(self, key: str) -> str:
        '''Name of a parameter as sent in the query string.

        eg for v5 : "inst_type" ==> "instType"
        '''
        raise NotImplementedError
