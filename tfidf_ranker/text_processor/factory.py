# tfidf_ranker/text_processor/factory.py
from tfidf_ranker.exceptions import ConfigurationError


class TokenizerFactory:

    DEFAULT_MODE = 'regexp'

    TOKENIZER_CLASSES = {
        "regexp": "tokenizers.RegexpWordTokenizer",    # Default, no NLTK data required
        "treebank": "tokenizers.TreebankTokenizer",    # Penn Treebank rules, no NLTK data required
        "punkt": "tokenizers.PunktTokenizer"           # Downloads the punkt model on first use
    }

    @staticmethod
    def create_tokenizer(mode=None):
        if mode is None:
            mode = TokenizerFactory.DEFAULT_MODE

        selected_class = TokenizerFactory.TOKENIZER_CLASSES.get(str(mode).lower())
        if selected_class is None:
            choices = ", ".join(TokenizerFactory.TOKENIZER_CLASSES)
            raise ConfigurationError(f"Unknown tokenizer mode '{mode}' (expected one of: {choices})")

        module_name, class_name = selected_class.rsplit(".", 1)
        module = __import__(f"tfidf_ranker.text_processor.{module_name}", fromlist=[class_name])
        return getattr(module, class_name)()
