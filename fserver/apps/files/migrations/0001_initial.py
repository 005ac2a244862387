from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='FileInfo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('blob', models.FileField(help_text='Storage key: {prefix}/{uuid}/{filename}', max_length=512, upload_to='')),
                ('filename', models.CharField(help_text='Original filename as uploaded', max_length=255)),
                ('content_type', models.CharField(help_text='Declared MIME type of the upload', max_length=255)),
                ('size_bytes', models.BigIntegerField(help_text='File size in bytes')),
                ('checksum_sha256', models.CharField(db_index=True, help_text='SHA256 hash for integrity verification', max_length=64)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'File info',
                'verbose_name_plural': 'File infos',
                'ordering': ['-created_at'],
            },
        ),
    ]
