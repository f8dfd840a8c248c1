from typing import Any

from eth_typing import HexStr
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.types import TxReceipt

from utils import CONFIG, Logger, SecretStr, singleton
from utils._types import ConfigDict

log = Logger(__name__)


@singleton
class Web3:
    """Singleton container class that holds connection to the node.

    Args:
        conf (ConfigDict, optional): `config_[network].yaml` dictionary.
            Defaults to `CONFIG`.
        no_singleton (bool, optional): Don't create singleton instance.
            Defaults to `False`.
        new_singleton (bool, optional): Create a new singleton instance.
            Don't use old singleton instance. Defaults to `False`.

    Attributes:
        chain_id (int): Chain ID number.
        eth (AsyncEth): Eth module of the node instance.
        network (str): Network name.
        node (AsyncWeb3): web3.py AsyncWeb3 instance.
    """

    __slots__ = "chain_id", "eth", "network", "node"

    def __init__(self, conf: ConfigDict = CONFIG) -> None:
        self.chain_id = conf["blockchain"]["chain_id"]
        self.network = conf["blockchain"]["name"]
        self.node = create_web3_instance(conf["blockchain"]["endpoint"])
        self.eth = self.node.eth
        log.debug(f"Created Wrapped Web3 for [b]{self.network}[/].")

    async def get_transaction_receipt(self, tx_hash: str | HexStr) -> TxReceipt:
        """Get transaction receipt in a single request.

        Args:
            tx_hash (str | HexStr): Transaction hash.

        Returns:
            TxReceipt: Transaction receipt.

        Raises:
            TransactionNotFound: If node doesn't have the receipt.
        """
        return await self.eth.get_transaction_receipt(tx_hash)

    def __repr__(self) -> str:
        return f"<Web3 {self.network} chain_id={self.chain_id}>"


def create_web3_instance(url: SecretStr, **kwargs: Any) -> AsyncWeb3:
    """Create AsyncWeb3 instance connected over HTTP.

    Args:
        url (SecretStr): Endpoint URL.
        kwargs (Any): `AsyncHTTPProvider` request keyword arguments.

    Returns:
        AsyncWeb3: AsyncWeb3 instance.
    """
    provider = AsyncHTTPProvider(url.str(), request_kwargs=kwargs or None)
    return AsyncWeb3(provider)
