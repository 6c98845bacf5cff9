"""Templates de texto e HTML dos emails de contato.

Placeholders usam str.format; valores chegam já escapados para HTML
nos templates *_HTML.
"""

from __future__ import annotations

from typing import Final

NOTIFICATION_TEXT: Final = """\
Nuevo mensaje desde el formulario de contacto

Nombre: {name}
Correo: {email}
Recibido: {received_at}

Mensaje:
{message}
"""

NOTIFICATION_HTML: Final = """\
<div style="font-family: Arial, sans-serif; color: #222; max-width: 600px;">
  <h2 style="color: #333;">Nuevo mensaje desde el formulario de contacto</h2>
  <p><strong>Nombre:</strong> {name}</p>
  <p><strong>Correo:</strong> <a href="mailto:{email}">{email}</a></p>
  <p><strong>Recibido:</strong> {received_at}</p>
  <p><strong>Mensaje:</strong></p>
  <div style="background: #f5f5f5; padding: 12px; border-radius: 4px;">{message}</div>
</div>
"""

CONFIRMATION_TEXT: Final = """\
Hola {name},

Gracias por escribirme. He recibido tu mensaje y te responderé lo antes posible.

Tu mensaje:
"{preview}"

Saludos,
{signature}
{links}"""

CONFIRMATION_HTML: Final = """\
<div style="font-family: Arial, sans-serif; color: #222; max-width: 600px;">
  <h2 style="color: #333;">¡Hola {name}!</h2>
  <p>Gracias por escribirme. He recibido tu mensaje y te responderé lo antes posible.</p>
  <p><strong>Tu mensaje:</strong></p>
  <blockquote style="border-left: 3px solid #ccc; margin: 0; padding-left: 12px;">{preview}</blockquote>
  <p>Saludos,<br>{signature}</p>
  {links}
</div>
"""

LINK_TEXT: Final = "{label}: {url}"
LINK_HTML: Final = '<a href="{url}" style="margin-right: 12px;">{label}</a>'
LINKS_HTML_WRAPPER: Final = '<p style="font-size: 13px;">{links}</p>'
